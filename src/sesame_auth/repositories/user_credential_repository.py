"""Abstract repository interface for user credentials.

This interface defines the contract for credential lookup.
Implementations can use SQLAlchemy, MongoDB, or any other storage.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserCredentialData:
    """Immutable credential data returned by repository.

    This is a pure data transfer object that decouples the auth service
    from persistence implementation details.
    """

    user_id: UUID
    email: str
    password_hash: str


class UserCredentialRepository(ABC):
    """
    Abstract repository interface for user authentication credentials.

    Example implementation:
        class UserCredentialRepositorySQLAlchemy(UserCredentialRepository):
            def __init__(self, session: AsyncSession):
                self._session = session

            async def find_by_email(self, email: str) -> UserCredentialData | None:
                # SQLAlchemy-specific implementation
                ...
    """

    @abstractmethod
    async def find_by_email(self, email: str) -> UserCredentialData | None:
        """
        Find credentials by the user's email address.

        Parameters
        ----------
        email
            The email address submitted at login

        Returns
        -------
        UserCredentialData if found, None otherwise
        """

    @abstractmethod
    async def update_last_login(self, user_id: UUID) -> None:
        """
        Record a successful login.

        Parameters
        ----------
        user_id
            The user's unique identifier
        """
