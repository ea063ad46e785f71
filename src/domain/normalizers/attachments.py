"""Attachment list normalization."""

from typing import Any

from domain.entities.attachment import ATTACHMENT_MIME_TYPES, PDF_MIME_TYPE, Attachment
from domain.normalizers.common import as_list, clean_text, is_safe_url


def normalize_attachments(value: Any) -> list[Attachment]:
    """Keep attachments with a safe, non-empty URL; one entry per URL (case-insensitive)."""
    seen: set[str] = set()
    attachments: list[Attachment] = []

    for item in as_list(value):
        if not isinstance(item, dict):
            continue

        url = clean_text(item.get("url"))
        if not url or not is_safe_url(url):
            continue
        key = url.lower()
        if key in seen:
            continue
        seen.add(key)

        mime_type = clean_text(item.get("mimeType"))
        attachments.append(
            Attachment(
                id=clean_text(item.get("id")) or f"att-{len(attachments) + 1}",
                label=clean_text(item.get("label")),
                url=url,
                mime_type=mime_type if mime_type in ATTACHMENT_MIME_TYPES else PDF_MIME_TYPE,
            )
        )

    return attachments
