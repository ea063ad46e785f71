"""Certification normalization."""

from typing import Any

from domain.entities.certification import DEFAULT_BADGE_COLOR, Certification
from domain.normalizers.attachments import normalize_attachments
from domain.normalizers.common import (
    as_mapping,
    clean_text,
    coerce_text,
    normalize_external_url,
    normalize_hex_color,
    normalize_order,
)
from domain.normalizers.palettes import sanitize_palette_code


def normalize_certification(raw: Any) -> Certification:
    """Coerce a loosely typed certification payload into a :class:`Certification`."""
    data = as_mapping(raw)
    organization = clean_text(data.get("organization"))
    return Certification(
        id=clean_text(data.get("id")),
        name=clean_text(data.get("name")),
        year=coerce_text(data.get("year")),
        organization=organization,
        description=clean_text(data.get("description")),
        credential_url=normalize_external_url(data.get("credentialUrl")),
        credential_id=coerce_text(data.get("credentialId")),
        thumbnail=clean_text(data.get("thumbnail")),
        attachments=normalize_attachments(data.get("attachments")),
        palette_code=sanitize_palette_code(data.get("paletteCode"), organization),
        badge_color=normalize_hex_color(data.get("badgeColor"), DEFAULT_BADGE_COLOR),
        order=normalize_order(data.get("order"), 0),
    )
