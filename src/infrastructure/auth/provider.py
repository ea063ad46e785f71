"""Identity carried by an admin session and the provider protocol that issues it."""

from dataclasses import dataclass
from typing import Protocol


@dataclass
class TokenUser:
    subject: str
    email: str
    role: str | None = None


class IAuthProvider(Protocol):
    """Issues session tokens at login and checks them on every write."""

    @property
    def expire_minutes(self) -> int:
        ...

    async def validate_token(self, token: str) -> TokenUser | None:
        """The admin behind ``token``, or None when it is invalid or expired."""
        ...

    def create_token(self, user: TokenUser) -> str:
        ...
