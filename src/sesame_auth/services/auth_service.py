"""Authentication service backing the login router."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sesame_auth.repositories import UserCredentialRepository
    from sesame_auth.services.jwt_service import JWTService
    from sesame_auth.services.password_verifier import PasswordVerifier

logger = logging.getLogger(__name__)


class AuthService:
    """
    Exchange email and password for an access token.

    Looks up stored credentials, verifies the password with bcrypt and
    issues a JWT. Unknown emails and wrong passwords both resolve to None
    so callers cannot tell them apart. Repository errors propagate.
    """

    def __init__(
        self,
        credential_repository: UserCredentialRepository,
        password_verifier: PasswordVerifier,
        jwt_service: JWTService,
    ):
        self._credential_repo = credential_repository
        self._password_verifier = password_verifier
        self._jwt_service = jwt_service

    async def auth(self, email: str, password: str) -> str | None:
        credential = await self._credential_repo.find_by_email(email)
        if credential is None:
            return None

        if not self._password_verifier.verify(password, credential.password_hash):
            logger.debug("Password mismatch for user: %s", credential.user_id)
            return None

        await self._credential_repo.update_last_login(credential.user_id)

        logger.info("User authenticated: %s", credential.user_id)
        return self._jwt_service.create_access_token(
            user_id=credential.user_id,
            email=credential.email,
        )
