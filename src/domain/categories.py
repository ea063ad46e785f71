"""Reconciliation of the managed category list with the projects that use it."""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from domain.entities.project import Project, ProjectCategory
from domain.normalizers.category import canonical_labels, normalize_category_list
from domain.normalizers.common import dedupe_strings


@dataclass
class ReconcileResult:
    """New category list plus the projects whose categories changed."""

    categories: list[ProjectCategory]
    updated_projects: list[Project] = field(default_factory=list)


def build_rename_map(
    previous: Sequence[ProjectCategory], current: Sequence[ProjectCategory]
) -> dict[str, str]:
    """Map ``previous_label.lower()`` to the new label for every id whose label changed."""
    previous_by_id = {category.id: category.label for category in previous}
    renames: dict[str, str] = {}
    for category in current:
        previous_label = previous_by_id.get(category.id)
        if previous_label is None:
            continue
        if previous_label.lower() != category.label.lower():
            renames[previous_label.lower()] = category.label
    return renames


def reconcile_project_categories(
    labels: Sequence[str], renames: dict[str, str], canonical: dict[str, str]
) -> list[str]:
    """Apply renames, then keep only managed labels, in their managed spelling."""
    renamed = (renames.get(label.lower(), label) for label in labels)
    return dedupe_strings(canonical.get(label.lower(), "") for label in renamed)


def restrict_to_categories(
    labels: Sequence[str], categories: Sequence[ProjectCategory]
) -> list[str]:
    """Match a project's labels against the managed list, using the managed spelling.

    Labels the list does not contain are dropped. With no managed list the
    labels pass through unchanged.
    """
    if not categories:
        return list(labels)
    canonical = canonical_labels(categories)
    return dedupe_strings(canonical.get(label.lower(), "") for label in labels)


def reconcile_categories(
    new_categories: Any,
    existing_projects: Sequence[Project],
    previous_categories: Sequence[ProjectCategory] = (),
) -> ReconcileResult:
    """Apply a category list edit across every project in one pass.

    Renamed labels are rewritten in each project's ``categories`` and labels
    no longer in the list are removed. The caller persists ``categories``
    and ``updated_projects`` together.
    """
    categories = normalize_category_list(new_categories, use_fallback_when_empty=False)
    previous = normalize_category_list(previous_categories, existing_projects)
    renames = build_rename_map(previous, categories)
    canonical = canonical_labels(categories)

    updated: list[Project] = []
    for project in existing_projects:
        reconciled = reconcile_project_categories(project.categories, renames, canonical)
        if reconciled != project.categories:
            updated.append(replace(project, categories=reconciled))

    return ReconcileResult(categories=categories, updated_projects=updated)
