"""Guards for duck-typed collaborators injected into routers."""

from __future__ import annotations

import inspect
import logging
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def has_capability(collaborator: object, operation: str) -> bool:
    """Return True if ``collaborator`` exposes a callable named ``operation``."""
    if collaborator is None:
        return False
    return callable(getattr(collaborator, operation, None))


def require_capability(collaborator: T | None, operation: str, role: str) -> T | None:
    """Return the collaborator if it can perform ``operation``, else None.

    The router treats a None collaborator as misconfiguration and answers
    with a server error instead of crashing.
    """
    if has_capability(collaborator, operation):
        return collaborator

    if collaborator is None:
        logger.warning("No %s configured; login requests will fail", role)
    else:
        logger.warning(
            "%s %s has no callable '%s'; login requests will fail",
            role,
            type(collaborator).__name__,
            operation,
        )
    return None


async def resolve(value: Any) -> Any:
    """Await ``value`` when it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value
