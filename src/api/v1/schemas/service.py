"""Pydantic schemas for Service API."""

from api.v1.schemas.common import CamelModel


class ServiceResponse(CamelModel):
    """Schema for Service response."""

    id: str
    number: str
    title: str
    description: str
    icon: str
    order: int
