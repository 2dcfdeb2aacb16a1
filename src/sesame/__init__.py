"""Sesame - login request handling.

Architecture:
    sesame/
    ├── application/ports/      # Authenticator and EmailValidator interfaces
    ├── infrastructure/email/   # Regex email validator
    └── presentation/
        ├── errors.py           # Login error values
        ├── helpers/            # HttpRequest / HttpResponse
        ├── routers/            # LoginRouter
        └── api/                # FastAPI adapter

Usage:
    from sesame import HttpRequest, LoginRouter
    from sesame.infrastructure.email import RegexEmailValidator

    router = LoginRouter(authenticator, RegexEmailValidator())
    response = await router.route(HttpRequest(body={"email": ..., "password": ...}))
"""

from sesame.presentation.errors import (
    ErrorCode,
    InvalidParamError,
    LoginError,
    MissingParamError,
    ServerError,
    ServerErrorReason,
    UnauthorizedError,
)
from sesame.presentation.helpers import HttpRequest, HttpResponse
from sesame.presentation.routers import LoginRouter

__all__ = [
    # Router
    "LoginRouter",
    # Request / response
    "HttpRequest",
    "HttpResponse",
    # Errors
    "ErrorCode",
    "LoginError",
    "MissingParamError",
    "InvalidParamError",
    "UnauthorizedError",
    "ServerError",
    "ServerErrorReason",
]
