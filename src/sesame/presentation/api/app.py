"""FastAPI application factory.

Exposes the login router over HTTP:

    POST {api_prefix}/auth/login   JSON body {"email": ..., "password": ...}
    GET  /health                   unversioned liveness check
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from sesame.infrastructure.email import RegexEmailValidator
from sesame.presentation.helpers import HttpRequest
from sesame.presentation.routers import LoginRouter
from sesame_config.settings import Settings, get_settings

if TYPE_CHECKING:
    from sesame.application.ports import Authenticator, EmailValidator


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up console output with timestamps and module names, at the
    level configured in settings for sesame modules.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("sesame").setLevel(log_level)
    logging.getLogger("sesame_auth").setLevel(log_level)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


async def _read_json_body(request: Request) -> Any:
    """Return the decoded JSON body, or None if it cannot be decoded."""
    try:
        return await request.json()
    except ValueError:
        logger.warning(
            "Unreadable JSON body on %s %s",
            request.method,
            request.url.path,
        )
        return None


def create_login_api_router(login_router: LoginRouter) -> APIRouter:
    router = APIRouter()

    @router.post(
        "/login",
        summary="Exchange email and password for an access token",
        responses={
            200: {"description": "Credentials accepted"},
            400: {"description": "Missing or invalid parameter"},
            401: {"description": "Credentials rejected"},
            500: {"description": "Server error"},
        },
    )
    async def login(request: Request) -> JSONResponse:
        body = await _read_json_body(request)
        response = await login_router.route(HttpRequest(body=body))
        return JSONResponse(
            status_code=response.status_code,
            content=response.to_content(),
        )

    return router


def create_app(
    authenticator: Authenticator | None = None,
    email_validator: EmailValidator | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Parameters
    ----------
    authenticator
        Credential exchange collaborator. Without one every well-formed
        login answers 500.
    email_validator
        Defaults to RegexEmailValidator.
    settings
        Defaults to the cached environment settings.
    """
    settings = settings or get_settings()
    _configure_logging(settings.log_level)

    login_router = LoginRouter(
        authenticator=authenticator,
        email_validator=email_validator or RegexEmailValidator(),
    )

    app = FastAPI(
        title=f"{settings.app_name} API",
        version=API_VERSION,
        debug=settings.debug,
    )
    app.include_router(
        create_login_api_router(login_router),
        prefix=f"{settings.api_prefix}/auth",
        tags=["Authentication"],
    )

    @app.get("/health", tags=["Health"])
    async def health() -> dict[str, str]:
        return {"status": "healthy", "version": API_VERSION}

    logger.info("Created %s API v%s", settings.app_name, API_VERSION)
    return app
