"""Project and project category domain entities."""

from dataclasses import dataclass, field

from domain.entities.attachment import Attachment

DEFAULT_PROJECT_THUMBNAIL = "/images/projects/placeholder-1.svg"


@dataclass
class ProjectLink:
    """External link shown on a project (repository, live demo, ...)."""

    label: str = ""
    url: str = ""


@dataclass
class Project:
    """Domain entity for a portfolio project."""

    id: str
    title: str = ""
    categories: list[str] = field(default_factory=list)
    description: str = ""
    thumbnail: str = DEFAULT_PROJECT_THUMBNAIL
    thumbnail_focus_x: float = 50.0
    thumbnail_focus_y: float = 50.0
    thumbnail_zoom: float = 1.0
    gallery: list[str] = field(default_factory=list)
    attachments: list[Attachment] = field(default_factory=list)
    links: list[ProjectLink] = field(default_factory=list)
    order: int = 0

    @property
    def category(self) -> str:
        """Legacy single-category field, derived from the first category."""
        return self.categories[0] if self.categories else ""


@dataclass
class ProjectCategory:
    """Managed category a project can be filed under."""

    id: str
    label: str
    order: int = 0
