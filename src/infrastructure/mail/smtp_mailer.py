"""SMTP delivery of outbound mail with aiosmtplib."""

from email.message import EmailMessage

import aiosmtplib
import structlog

from core.exceptions import EmailServiceUnavailableError

logger = structlog.get_logger()

SENDER_NAME = "Portfolio Contact"


class SMTPMailer:
    """Sends multipart (text + HTML) messages through an authenticated SMTP relay."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        use_tls: bool = False,
        timeout: float = 20.0,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._use_tls = use_tls
        self._timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self._host and self._username and self._password)

    def build_message(self, to: str, subject: str, text: str, html: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = f'"{SENDER_NAME}" <{self._username}>'
        message["To"] = to
        message["Subject"] = subject
        message.set_content(text)
        message.add_alternative(html, subtype="html")
        return message

    async def send(self, to: str, subject: str, text: str, html: str) -> None:
        if not self.configured:
            raise EmailServiceUnavailableError("Email service not configured")

        message = self.build_message(to, subject, text, html)
        try:
            await aiosmtplib.send(
                message,
                hostname=self._host,
                port=self._port,
                username=self._username,
                password=self._password,
                use_tls=self._use_tls,
                start_tls=not self._use_tls,
                timeout=self._timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as exc:
            logger.error("contact_email_failed", error=str(exc))
            raise EmailServiceUnavailableError("Failed to send message") from exc
