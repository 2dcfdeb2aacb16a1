"""Transport-neutral request and response values for the login router."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from fastapi import status

from sesame.presentation.errors import (
    LoginError,
    ServerError,
    ServerErrorReason,
    UnauthorizedError,
)


@dataclass(frozen=True)
class HttpRequest:
    """Incoming request as seen by the login router."""

    body: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class HttpResponse:
    """Outgoing response: a status code and an error value or result body."""

    status_code: int
    body: Any = None

    @property
    def is_error(self) -> bool:
        return isinstance(self.body, LoginError)

    def to_content(self) -> Any:
        """Render the body into something a JSON encoder accepts."""
        if isinstance(self.body, LoginError):
            return self.body.to_dict()
        return self.body


def bad_request(error: LoginError) -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_400_BAD_REQUEST, body=error)


def unauthorized() -> HttpResponse:
    return HttpResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        body=UnauthorizedError(),
    )


def server_error(
    reason: ServerErrorReason = ServerErrorReason.UNSPECIFIED,
) -> HttpResponse:
    return HttpResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        body=ServerError(reason=reason),
    )


def ok(body: Any) -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_200_OK, body=body)
