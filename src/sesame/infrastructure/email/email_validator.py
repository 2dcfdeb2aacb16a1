"""Regex-based email validator.

Provides the default EmailValidator used by the HTTP adapter.
"""

import re

from sesame.application.ports import EmailValidator

# Simple but effective email regex
# Validates: user@domain.tld (minimum requirements)
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class RegexEmailValidator(EmailValidator):
    """Validate email syntax against ``EMAIL_PATTERN``.

    The address is matched exactly as submitted, since the same string is
    handed to the authenticator. Surrounding whitespace makes it invalid.

    Examples
    --------
    >>> validator = RegexEmailValidator()
    >>> validator.is_valid("user@example.com")
    True
    >>> validator.is_valid("user@example.com ")
    False
    """

    def __init__(self, pattern: re.Pattern[str] = EMAIL_PATTERN):
        self._pattern = pattern

    def is_valid(self, email: str) -> bool:
        if not isinstance(email, str):
            return False
        return self._pattern.fullmatch(email) is not None
