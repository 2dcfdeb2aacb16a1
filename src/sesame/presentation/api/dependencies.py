"""Composition helpers for the API layer.

Builds the collaborators the login router needs from settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sesame_auth import AuthService, JWTService, PasswordVerifier
from sesame_config.settings import Settings

if TYPE_CHECKING:
    from sesame_auth.repositories import UserCredentialRepository


def get_jwt_service(settings: Settings) -> JWTService:
    """Get JWT service configured from settings.

    Raises ValueError when no JWT secret is configured.
    """
    secret = settings.jwt_secret_key
    return JWTService(
        secret_key=secret.get_secret_value() if secret else "",
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_verifier() -> PasswordVerifier:
    """Get bcrypt password verifier."""
    return PasswordVerifier()


def build_auth_service(
    settings: Settings,
    credential_repository: UserCredentialRepository,
) -> AuthService:
    """
    Compose the bundled authenticator.

    The credential repository is supplied by the caller; this package
    ships no persistence.
    """
    return AuthService(
        credential_repository=credential_repository,
        password_verifier=get_password_verifier(),
        jwt_service=get_jwt_service(settings),
    )
