"""Request/response helpers shared by presentation routers."""

from sesame.presentation.helpers.http_response import (
    HttpRequest,
    HttpResponse,
    bad_request,
    ok,
    server_error,
    unauthorized,
)

__all__ = [
    "HttpRequest",
    "HttpResponse",
    "bad_request",
    "ok",
    "server_error",
    "unauthorized",
]
