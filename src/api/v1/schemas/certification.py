"""Pydantic schemas for Certification API."""

from api.v1.schemas.common import AttachmentResponse, CamelModel


class CertificationResponse(CamelModel):
    """Schema for Certification response."""

    id: str
    name: str
    year: str
    organization: str
    description: str
    credential_url: str
    credential_id: str
    thumbnail: str
    attachments: list[AttachmentResponse]
    palette_code: str
    badge_color: str
    order: int
