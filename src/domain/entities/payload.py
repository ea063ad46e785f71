"""Conversion of entities to camelCase payload dicts."""

from dataclasses import asdict, is_dataclass
from typing import Any


def to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _camelize(value: Any) -> Any:
    if isinstance(value, dict):
        return {to_camel(key): _camelize(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_camelize(item) for item in value]
    return value


def to_payload(entity: Any) -> dict[str, Any]:
    """Serialize a dataclass entity into the camelCase shape the normalizers accept."""
    if not is_dataclass(entity) or isinstance(entity, type):
        raise TypeError(f"Expected a dataclass instance, got {type(entity).__name__}")
    return _camelize(asdict(entity))  # type: ignore[no-any-return]
