"""Schemas shared across the API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response base: snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessResponse(BaseModel):
    """Acknowledgement for operations without a resource body."""

    success: bool = True


class AttachmentResponse(CamelModel):
    id: str
    label: str
    url: str
    mime_type: str
