"""Project category list normalization."""

from collections.abc import Sequence
from typing import Any

from domain.entities.project import Project, ProjectCategory
from domain.normalizers.common import as_list, clean_text, normalize_order, slugify
from domain.ordering import sort_by_order


def build_category_id(label: str) -> str:
    return f"cat-{slugify(label) or 'item'}"


def _entries(value: Any) -> list[ProjectCategory]:
    entries: list[ProjectCategory] = []
    for index, item in enumerate(as_list(value)):
        if isinstance(item, ProjectCategory):
            item = {"id": item.id, "label": item.label, "order": item.order}
        if not isinstance(item, dict):
            continue
        label = clean_text(item.get("label"))
        if not label:
            continue
        entries.append(
            ProjectCategory(
                id=clean_text(item.get("id")) or build_category_id(label),
                label=label,
                order=normalize_order(item.get("order"), index + 1),
            )
        )
    return entries


def derive_categories_from_projects(projects: Sequence[Project]) -> list[ProjectCategory]:
    """Build a category list from the labels projects already use, in project order."""
    seen: set[str] = set()
    labels: list[str] = []
    for project in sort_by_order(projects):
        for label in project.categories:
            key = label.lower()
            if key in seen:
                continue
            seen.add(key)
            labels.append(label)

    return [
        ProjectCategory(id=build_category_id(label), label=label, order=index + 1)
        for index, label in enumerate(labels)
    ]


def normalize_category_list(
    value: Any,
    fallback_projects: Sequence[Project] = (),
    use_fallback_when_empty: bool = True,
) -> list[ProjectCategory]:
    """Normalize a managed category list.

    Entries are sorted by their supplied order, later duplicate labels
    (case-insensitive) are dropped, missing or clashing ids are derived from
    the label, and order is reassigned as 1..N. An empty list falls back to
    the labels used by ``fallback_projects`` unless disabled.
    """
    seen_labels: set[str] = set()
    seen_ids: set[str] = set()
    normalized: list[ProjectCategory] = []

    for entry in sort_by_order(_entries(value)):
        label_key = entry.label.lower()
        if label_key in seen_labels:
            continue
        seen_labels.add(label_key)

        category_id = entry.id
        if category_id in seen_ids:
            base_id = build_category_id(entry.label)
            category_id = base_id
            suffix = 2
            while category_id in seen_ids:
                category_id = f"{base_id}-{suffix}"
                suffix += 1
        seen_ids.add(category_id)
        normalized.append(ProjectCategory(id=category_id, label=entry.label, order=entry.order))

    if not normalized and use_fallback_when_empty:
        normalized = derive_categories_from_projects(fallback_projects)

    return [
        ProjectCategory(id=category.id, label=category.label, order=index + 1)
        for index, category in enumerate(normalized)
    ]


def canonical_labels(categories: Sequence[ProjectCategory]) -> dict[str, str]:
    """Managed spelling of each category, keyed by its lowercased label."""
    return {category.label.lower(): category.label for category in categories}
