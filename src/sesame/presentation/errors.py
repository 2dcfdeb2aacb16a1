"""Login error taxonomy.

These are value objects, not exceptions: the login router returns them as
response bodies and never raises them. Two instances of the same error with
the same data compare equal, which keeps assertions in tests simple.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    MISSING_PARAM = "MISSING_PARAM"
    INVALID_PARAM = "INVALID_PARAM"
    UNAUTHORIZED = "UNAUTHORIZED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ServerErrorReason(str, Enum):
    """Why a request ended in a server error.

    Never rendered to clients; only visible in logs and tests.
    """

    MALFORMED_REQUEST = "MALFORMED_REQUEST"
    MISSING_AUTHENTICATOR = "MISSING_AUTHENTICATOR"
    MISSING_EMAIL_VALIDATOR = "MISSING_EMAIL_VALIDATOR"
    EMAIL_VALIDATOR_FAILED = "EMAIL_VALIDATOR_FAILED"
    AUTHENTICATOR_FAILED = "AUTHENTICATOR_FAILED"
    UNSPECIFIED = "UNSPECIFIED"


class LoginError:
    """Base class for all login error values."""

    code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR

    @property
    def message(self) -> str:
        return "Internal error"

    def to_dict(self) -> dict[str, Any]:
        return {"detail": self.message, "code": self.code.value}

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class MissingParamError(LoginError):
    """A required request parameter is absent or empty."""

    param_name: str

    code: ClassVar[ErrorCode] = ErrorCode.MISSING_PARAM

    @property
    def message(self) -> str:
        return f"Missing param: {self.param_name}"


@dataclass(frozen=True)
class InvalidParamError(LoginError):
    """A request parameter is present but malformed."""

    param_name: str

    code: ClassVar[ErrorCode] = ErrorCode.INVALID_PARAM

    @property
    def message(self) -> str:
        return f"Invalid param: {self.param_name}"


@dataclass(frozen=True)
class UnauthorizedError(LoginError):
    """The credentials were rejected."""

    code: ClassVar[ErrorCode] = ErrorCode.UNAUTHORIZED

    @property
    def message(self) -> str:
        return "Unauthorized"


@dataclass(frozen=True)
class ServerError(LoginError):
    """Blanket server-side failure.

    ``reason`` is excluded from equality and from ``to_dict()`` so every
    server error looks the same to a client.
    """

    reason: ServerErrorReason = field(
        default=ServerErrorReason.UNSPECIFIED,
        compare=False,
    )

    code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR
