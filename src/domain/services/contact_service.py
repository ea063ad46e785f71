"""Contact form handling."""

from html import escape
from typing import Any, Callable, Mapping

import structlog

from core.exceptions import EmailServiceUnavailableError, ValidationError
from domain.entities.contact import ContactSubmission
from domain.normalizers.common import as_mapping, clean_text
from domain.normalizers.contact import normalize_contact_message
from domain.repositories.mailer import IMailer
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

MAX_MESSAGE_LENGTH = 5000
SUBJECT_PREFIX = "[Portfolio Contact]"


def _render_text(submission: ContactSubmission) -> str:
    lines = ["New contact form submission", f"Name: {submission.name}"]
    if submission.email:
        lines.append(f"Email: {submission.email}")
    lines.extend([f"Subject: {submission.subject}", "", "Message:", submission.message_text])
    return "\n".join(lines)


def _render_html(submission: ContactSubmission) -> str:
    rows = [f"<p><strong>Name:</strong> {escape(submission.name)}</p>"]
    if submission.email:
        rows.append(f"<p><strong>Email:</strong> {escape(submission.email)}</p>")
    rows.append(f"<p><strong>Subject:</strong> {escape(submission.subject)}</p>")
    return (
        "<h2>New contact form submission</h2>"
        + "".join(rows)
        + f"<p><strong>Message:</strong></p><div>{submission.message_html}</div>"
    )


class ContactService:
    """Validates, stores and forwards contact form messages."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        mailer: IMailer,
        recipient: str,
    ) -> None:
        self._uow_factory = uow_factory
        self._mailer = mailer
        self._recipient = recipient

    async def submit(self, payload: Mapping[str, Any]) -> ContactSubmission:
        """Handle one contact form post.

        Raises:
            ValidationError: missing name, subject or message, or message too long
            EmailServiceUnavailableError: no recipient configured or delivery failed
        """
        data = as_mapping(payload)
        name = clean_text(data.get("name"))
        subject = clean_text(data.get("subject"))
        message = normalize_contact_message(data.get("messageHtml"), data.get("message"))

        if not name or not subject or not message.text:
            raise ValidationError("Name, subject, and message are required")
        if len(message.text) > MAX_MESSAGE_LENGTH:
            raise ValidationError(
                "Message is too long",
                details={"max_length": MAX_MESSAGE_LENGTH, "length": len(message.text)},
            )

        submission = ContactSubmission(
            name=name,
            subject=subject,
            message_text=message.text,
            message_html=message.html,
            email=clean_text(data.get("email")),
        )

        async with self._uow_factory() as uow:
            submission = await uow.contact_submissions.create(submission)
            await uow.commit()

        if not self._recipient:
            raise EmailServiceUnavailableError("No contact recipient configured")

        await self._mailer.send(
            to=self._recipient,
            subject=f"{SUBJECT_PREFIX} {subject}",
            text=_render_text(submission),
            html=_render_html(submission),
        )
        logger.info("contact_email_sent", submission_id=str(submission.id))
        return submission
