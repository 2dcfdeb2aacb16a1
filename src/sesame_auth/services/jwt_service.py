"""Access token issuing with PyJWT."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt


class JWTService:
    """Sign HS256 access tokens for authenticated users.

    Tokens carry ``sub`` (user id), ``email``, ``iat`` and ``exp`` claims.
    Verifying them is left to the services that receive them.
    """

    ALGORITHM = "HS256"

    def __init__(self, secret_key: str, access_token_expire_hours: int = 1):
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._lifetime = timedelta(hours=access_token_expire_hours)

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        issued_at = datetime.now(tz=timezone.utc)
        claims = {
            "sub": str(user_id),
            "email": email,
            "iat": issued_at,
            "exp": issued_at + (expires_delta or self._lifetime),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.ALGORITHM)
