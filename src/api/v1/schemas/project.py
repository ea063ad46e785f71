"""Pydantic schemas for Project and project category API."""

from pydantic import ConfigDict

from api.v1.schemas.common import AttachmentResponse, CamelModel


class ProjectLinkResponse(CamelModel):
    label: str
    url: str


class ProjectResponse(CamelModel):
    """Schema for Project response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "proj-1a2b3c4d",
                "title": "Invoice Bot",
                "categories": ["Automation", "Web"],
                "category": "Automation",
                "description": "<p>Reads invoices.</p>",
                "thumbnail": "/images/projects/a.png",
                "thumbnailFocusX": 50,
                "thumbnailFocusY": 50,
                "thumbnailZoom": 1,
                "gallery": ["/images/projects/a.png"],
                "attachments": [],
                "links": [{"label": "Repo", "url": "https://github.com/jane/bot"}],
                "order": 1,
            }
        },
    )

    id: str
    title: str
    categories: list[str]
    category: str
    description: str
    thumbnail: str
    thumbnail_focus_x: float
    thumbnail_focus_y: float
    thumbnail_zoom: float
    gallery: list[str]
    attachments: list[AttachmentResponse]
    links: list[ProjectLinkResponse]
    order: int


class ProjectCategoryResponse(CamelModel):
    """Schema for a managed project category."""

    id: str
    label: str
    order: int
