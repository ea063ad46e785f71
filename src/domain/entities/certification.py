"""Certification domain entity."""

from dataclasses import dataclass, field

from domain.entities.attachment import Attachment

DEFAULT_BADGE_COLOR = "#8b5cf6"
DEFAULT_PALETTE_CODE = "provider-slate"


@dataclass
class Certification:
    """Domain entity for a certification or credential."""

    id: str
    name: str = ""
    year: str = ""
    organization: str = ""
    description: str = ""
    credential_url: str = ""
    credential_id: str = ""
    thumbnail: str = ""
    attachments: list[Attachment] = field(default_factory=list)
    palette_code: str = DEFAULT_PALETTE_CODE
    badge_color: str = DEFAULT_BADGE_COLOR
    order: int = 0
