"""Dense ordering of list-like content (projects, certifications, services, categories)."""

from collections.abc import Iterable, Sequence
from dataclasses import replace
from typing import Any, Protocol, TypeVar

from core.exceptions import ValidationError


class OrderedRecord(Protocol):
    id: str
    order: int


T = TypeVar("T", bound=OrderedRecord)


def sort_by_order(records: Iterable[T]) -> list[T]:
    """Ascending by ``order``; records sharing an order keep their input sequence."""
    return sorted(records, key=lambda record: record.order)


def reindex(records: Iterable[T]) -> list[T]:
    """Return copies with ``order`` reassigned as 1..N in the given sequence."""
    return [replace(record, order=index + 1) for index, record in enumerate(records)]  # type: ignore[type-var]


def extract_ordered_ids(payload: Any) -> list[str]:
    """Pull the id sequence out of a reorder request body.

    Accepts ``["a", "b"]``, ``[{"id": "a"}, {"id": "b"}]`` or either of those
    wrapped as ``{"ids": [...]}``. Blank entries are dropped.
    """
    if isinstance(payload, dict):
        payload = payload.get("ids", payload.get("orderedIds"))
    if not isinstance(payload, list):
        return []

    ids: list[str] = []
    for item in payload:
        if isinstance(item, dict):
            item = item.get("id")
        if isinstance(item, str) and item.strip():
            ids.append(item.strip())
    return ids


def apply_reorder(existing: Sequence[T], ordered_ids: Sequence[str]) -> list[T]:
    """Arrange ``existing`` in the exact sequence of ``ordered_ids`` with order 1..N.

    ``ordered_ids`` must be a full permutation of the collection's ids;
    anything else raises :class:`ValidationError` and nothing is changed.
    """
    if not ordered_ids:
        raise ValidationError("Invalid reorder payload")

    lowered = [record_id.lower() for record_id in ordered_ids]
    if len(set(lowered)) != len(lowered):
        raise ValidationError("Duplicate IDs are not allowed")

    if len(ordered_ids) != len(existing):
        raise ValidationError(
            "Reorder payload length mismatch",
            details={"expected": len(existing), "received": len(ordered_ids)},
        )

    by_id = {record.id: record for record in existing}
    reordered: list[T] = []
    for index, record_id in enumerate(ordered_ids):
        record = by_id.get(record_id)
        if record is None:
            raise ValidationError(f"Unknown ID: {record_id}", details={"id": record_id})
        reordered.append(replace(record, order=index + 1))  # type: ignore[type-var]
    return reordered


class _Writable(Protocol[T]):
    async def put(self, record: T) -> T:
        ...


async def persist_order_changes(
    repository: "_Writable[T]", before: Sequence[T], after: Sequence[T]
) -> dict[str, T]:
    """Write the records of ``after`` that are new or whose order moved.

    Returns every record of ``after`` keyed by id, as stored.
    """
    previous_order = {record.id: record.order for record in before}
    written: dict[str, T] = {}
    for record in after:
        if previous_order.get(record.id) != record.order:
            written[record.id] = await repository.put(record)
        else:
            written[record.id] = record
    return written
