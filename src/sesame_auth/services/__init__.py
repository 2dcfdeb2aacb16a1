"""Authentication services.

Provides password verification, access token signing and the AuthService
authenticator.
"""

from sesame_auth.services.auth_service import AuthService
from sesame_auth.services.jwt_service import JWTService
from sesame_auth.services.password_verifier import PasswordVerifier

__all__ = [
    "AuthService",
    "JWTService",
    "PasswordVerifier",
]
