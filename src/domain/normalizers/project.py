"""Project normalization."""

from typing import Any

from domain.entities.project import DEFAULT_PROJECT_THUMBNAIL, Project, ProjectLink
from domain.normalizers.attachments import normalize_attachments
from domain.normalizers.common import (
    as_list,
    as_mapping,
    clean_text,
    dedupe_labels,
    normalize_focus,
    normalize_order,
    normalize_safe_url,
    normalize_zoom,
)
from domain.normalizers.html import sanitize_rich_html


def normalize_project_categories(categories: Any, legacy_category: Any = None) -> list[str]:
    """Category labels of a project.

    The plural ``categories`` list wins; the legacy singular ``category``
    string is only used when the list is missing or empty.
    """
    labels = dedupe_labels(categories)
    if labels:
        return labels
    legacy = clean_text(legacy_category)
    return [legacy] if legacy else []


def resolve_thumbnail(value: Any, gallery: list[str]) -> str:
    """The thumbnail must be a gallery image when a gallery exists."""
    thumbnail = clean_text(value)
    if gallery:
        return thumbnail if thumbnail in gallery else gallery[0]
    return thumbnail or DEFAULT_PROJECT_THUMBNAIL


def normalize_links(value: Any) -> list[ProjectLink]:
    links: list[ProjectLink] = []
    for item in as_list(value):
        if not isinstance(item, dict):
            continue
        label = clean_text(item.get("label"))
        url = normalize_safe_url(item.get("url"))
        if label or url:
            links.append(ProjectLink(label=label, url=url))
    return links


def normalize_project(raw: Any) -> Project:
    """Coerce a loosely typed project payload into a fully populated :class:`Project`."""
    data = as_mapping(raw)
    gallery = dedupe_labels(data.get("gallery"))
    return Project(
        id=clean_text(data.get("id")),
        title=clean_text(data.get("title")),
        categories=normalize_project_categories(data.get("categories"), data.get("category")),
        description=sanitize_rich_html(data.get("description")),
        thumbnail=resolve_thumbnail(data.get("thumbnail"), gallery),
        thumbnail_focus_x=normalize_focus(data.get("thumbnailFocusX")),
        thumbnail_focus_y=normalize_focus(data.get("thumbnailFocusY")),
        thumbnail_zoom=normalize_zoom(data.get("thumbnailZoom")),
        gallery=gallery,
        attachments=normalize_attachments(data.get("attachments")),
        links=normalize_links(data.get("links")),
        order=normalize_order(data.get("order"), 0),
    )
