"""Ports the login router depends on.

Adapters in ``sesame.infrastructure`` and ``sesame_auth`` implement these.
"""

from sesame.application.ports.authenticator import Authenticator
from sesame.application.ports.email_validator import EmailValidator

__all__ = [
    "Authenticator",
    "EmailValidator",
]
