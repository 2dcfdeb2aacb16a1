"""Login router: turns a raw login request into a status code and body."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from sesame.presentation.errors import (
    InvalidParamError,
    MissingParamError,
    ServerErrorReason,
)
from sesame.presentation.helpers import (
    HttpResponse,
    bad_request,
    ok,
    server_error,
    unauthorized,
)
from sesame.presentation.routers.capabilities import require_capability, resolve

if TYPE_CHECKING:
    from sesame.application.ports import Authenticator, EmailValidator

logger = logging.getLogger(__name__)


class LoginRouter:
    """
    Handle login requests.

    Runs an ordered, short-circuiting pipeline where the first failing
    check decides the response:

    1. request and body present (500)
    2. email, then password, present and non-empty (400)
    3. authenticator configured (500)
    4. email validator configured (500)
    5. email accepted by the validator (400, or 500 if it raises)
    6. credentials accepted by the authenticator (401, or 500 if it raises)
    7. 200 with ``{"access_token": token}``

    ``route`` never raises for ordinary failures; every outcome is an
    ``HttpResponse``. No request data is kept between calls, so one
    instance can serve concurrent requests. There is no internal timeout:
    a collaborator that hangs makes ``route`` hang.
    """

    def __init__(
        self,
        authenticator: Authenticator | None = None,
        email_validator: EmailValidator | None = None,
    ):
        self._authenticator = require_capability(
            authenticator,
            "auth",
            "Authenticator",
        )
        self._email_validator = require_capability(
            email_validator,
            "is_valid",
            "EmailValidator",
        )

    async def route(self, http_request: Any = None) -> HttpResponse:
        body = getattr(http_request, "body", None)
        if not isinstance(body, Mapping):
            logger.warning("Rejected login request without a usable body")
            return server_error(ServerErrorReason.MALFORMED_REQUEST)

        email = body.get("email")
        password = body.get("password")
        if not email:
            logger.debug("Login request is missing email")
            return bad_request(MissingParamError("email"))
        if not password:
            logger.debug("Login request is missing password")
            return bad_request(MissingParamError("password"))

        if self._authenticator is None:
            return server_error(ServerErrorReason.MISSING_AUTHENTICATOR)
        if self._email_validator is None:
            return server_error(ServerErrorReason.MISSING_EMAIL_VALIDATOR)

        try:
            is_valid = await resolve(self._email_validator.is_valid(email))
        except Exception:
            logger.exception("Email validator failed")
            return server_error(ServerErrorReason.EMAIL_VALIDATOR_FAILED)
        if not is_valid:
            logger.debug("Login request has an invalid email")
            return bad_request(InvalidParamError("email"))

        try:
            access_token = await resolve(self._authenticator.auth(email, password))
        except Exception:
            logger.exception("Authenticator failed")
            return server_error(ServerErrorReason.AUTHENTICATOR_FAILED)
        if not access_token:
            logger.debug("Login rejected for submitted credentials")
            return unauthorized()

        logger.info("Login succeeded")
        return ok({"access_token": access_token})
