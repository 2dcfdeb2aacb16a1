"""Password verification against stored bcrypt hashes."""

import bcrypt


class PasswordVerifier:
    """Check a submitted password against a bcrypt hash.

    Hashes are produced wherever accounts are created; this package only
    reads them.
    """

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if ``password`` matches ``password_hash``."""
        if not isinstance(password, str) or not isinstance(password_hash, str):
            return False
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except ValueError:
            # Invalid hash format
            return False
