"""Outbound mail protocol."""

from typing import Protocol


class IMailer(Protocol):
    """Sends a single message.

    Raises:
        EmailServiceUnavailableError: when mail is not configured or delivery fails
    """

    async def send(self, to: str, subject: str, text: str, html: str) -> None:
        ...
