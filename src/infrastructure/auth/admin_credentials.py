"""Admin login check against the configured email and bcrypt hash."""

import hmac

import bcrypt


class AdminCredentials:
    """The single admin account this site has."""

    def __init__(self, email: str, password_hash: str) -> None:
        self._email = email.strip().lower()
        self._password_hash = password_hash.strip().encode()

    @property
    def configured(self) -> bool:
        return bool(self._email and self._password_hash)

    def verify(self, email: str, password: str) -> bool:
        if not self.configured or not email or not password:
            return False
        if not hmac.compare_digest(email.strip().lower().encode(), self._email.encode()):
            return False
        try:
            return bcrypt.checkpw(password.encode(), self._password_hash)
        except ValueError:
            # Malformed hash in configuration
            return False


def hash_password(password: str) -> str:
    """bcrypt hash suitable for ``ADMIN_PASSWORD_HASH``."""
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=10)).decode()
