"""Service normalization."""

from typing import Any

from domain.entities.service import DEFAULT_SERVICE_ICON, Service
from domain.normalizers.common import as_mapping, clean_text, coerce_text, normalize_order


def default_service_number(position: int) -> str:
    return f"{position:02d}/"


def normalize_service(raw: Any, position: int = 1) -> Service:
    """Coerce a service payload; ``position`` (1-based) seeds the default number and order."""
    data = as_mapping(raw)
    return Service(
        id=clean_text(data.get("id")),
        number=coerce_text(data.get("number")) or default_service_number(position),
        title=clean_text(data.get("title")),
        description=clean_text(data.get("description")),
        icon=clean_text(data.get("icon")) or DEFAULT_SERVICE_ICON,
        order=normalize_order(data.get("order"), position),
    )
