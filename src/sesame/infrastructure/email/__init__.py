"""Email adapters."""

from sesame.infrastructure.email.email_validator import (
    EMAIL_PATTERN,
    RegexEmailValidator,
)

__all__ = [
    "EMAIL_PATTERN",
    "RegexEmailValidator",
]
