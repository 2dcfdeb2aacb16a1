"""Sesame Auth - reference authenticator for the login router.

This package provides:
- Password verification (bcrypt)
- JWT access token signing
- AuthService, which exchanges credentials for an access token using a
  pluggable credential repository

It has no dependency on the ``sesame`` package; AuthService satisfies the
router's authenticator contract by exposing ``auth``.

Architecture:
    sesame_auth/
    ├── services/           # PasswordVerifier, JWTService, AuthService
    └── repositories/       # Abstract interfaces

Usage:
    from sesame_auth import AuthService, JWTService, PasswordVerifier

    authenticator = AuthService(
        credential_repository=my_repository,
        password_verifier=PasswordVerifier(),
        jwt_service=JWTService(secret_key="..."),
    )
"""

from sesame_auth.repositories import UserCredentialData, UserCredentialRepository
from sesame_auth.services import AuthService, JWTService, PasswordVerifier

__all__ = [
    # Services
    "AuthService",
    "JWTService",
    "PasswordVerifier",
    # Repositories (interfaces)
    "UserCredentialData",
    "UserCredentialRepository",
]
