"""Authenticator port - what the login router needs to exchange credentials for a token."""

from abc import ABC, abstractmethod


class Authenticator(ABC):
    """Exchange an email and password for an access token.

    Implementations return a falsy value (``None`` or ``""``) when the
    credentials are rejected. Any exception they raise is treated by the
    login router as a server-side fault.
    """

    @abstractmethod
    async def auth(self, email: str, password: str) -> str | None:
        """Return an access token, or a falsy value for rejected credentials."""
