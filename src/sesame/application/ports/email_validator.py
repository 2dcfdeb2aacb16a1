"""EmailValidator port - syntactic email checks used before authentication."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable


class EmailValidator(ABC):
    """Judge whether an email address is syntactically valid.

    ``is_valid`` may be a plain method or a coroutine; the login router
    awaits the result whenever it is awaitable.
    """

    @abstractmethod
    def is_valid(self, email: str) -> bool | Awaitable[bool]:
        """Return True when the address is well-formed."""
