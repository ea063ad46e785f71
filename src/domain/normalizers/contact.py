"""Contact form message normalization."""

from typing import Any, NamedTuple

from domain.normalizers.html import (
    html_to_text,
    normalize_text_whitespace,
    plain_text_to_html,
    sanitize_message_html,
)


class ContactMessage(NamedTuple):
    html: str
    text: str


def normalize_contact_message(message_html: Any, message_text: Any) -> ContactMessage:
    """Prefer the rich-text message; fall back to the legacy plain ``message`` field."""
    sanitized = sanitize_message_html(message_html)
    text = html_to_text(sanitized)
    if text:
        return ContactMessage(html=sanitized, text=text)

    legacy = normalize_text_whitespace(message_text) if isinstance(message_text, str) else ""
    if not legacy:
        return ContactMessage(html="", text="")

    fallback_html = sanitize_message_html(plain_text_to_html(legacy))
    return ContactMessage(html=fallback_html, text=html_to_text(fallback_html))
