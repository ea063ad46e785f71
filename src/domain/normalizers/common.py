"""Primitive coercions shared by the entity normalizers.

Every helper here is total: whatever JSON-ish value comes in, a value of the
declared type comes out.
"""

import math
import re
from collections.abc import Iterable, Mapping
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_KNOWN_SCHEME = re.compile(r"^(https?://|mailto:|tel:)", re.IGNORECASE)
_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_UNSAFE_PREFIXES = ("javascript:", "data:text/html")


def as_mapping(value: Any) -> Mapping[str, Any]:
    """Treat anything that is not a mapping as an empty payload."""
    return value if isinstance(value, Mapping) else {}


def as_list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


def clean_text(value: Any) -> str:
    """Trimmed string, or ``""`` for non-strings."""
    return value.strip() if isinstance(value, str) else ""


def coerce_text(value: Any) -> str:
    """Like :func:`clean_text` but also accepts numbers (``2021`` -> ``"2021"``)."""
    if isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value) if math.isfinite(value) else ""
    return clean_text(value)


def parse_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def parse_int(value: Any) -> int | None:
    """Parse an integer leniently: ``"2019"``, ``2019.7`` and ``"2019 AD"`` all give 2019."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


def clamp(value: float, minimum: float, maximum: float) -> float:
    return min(maximum, max(minimum, value))


def normalize_focus(value: Any, fallback: float = 50.0) -> float:
    """Focus point coordinate, as a percentage in [0, 100]."""
    parsed = parse_number(value)
    if parsed is None:
        return fallback
    return clamp(parsed, 0.0, 100.0)


def normalize_zoom(value: Any, fallback: float = 1.0) -> float:
    """Image zoom factor in [1, 3]."""
    parsed = parse_number(value)
    if parsed is None:
        return fallback
    return clamp(parsed, 1.0, 3.0)


def normalize_order(value: Any, fallback: int) -> int:
    parsed = parse_int(value)
    return fallback if parsed is None else parsed


def dedupe_labels(values: Any) -> list[str]:
    """Trim, drop empties and drop case-insensitive repeats, keeping first-seen order."""
    return dedupe_strings(clean_text(item) for item in as_list(values))


def dedupe_strings(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    unique: list[str] = []
    for value in values:
        if not value:
            continue
        key = value.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(value)
    return unique


def is_safe_url(value: str) -> bool:
    lowered = value.strip().lower()
    return not lowered.startswith(_UNSAFE_PREFIXES)


def normalize_safe_url(value: Any) -> str:
    """Trimmed URL, or ``""`` when it uses a script-capable scheme."""
    url = clean_text(value)
    return url if url and is_safe_url(url) else ""


def normalize_external_url(value: Any) -> str:
    """Normalize a link typed by hand.

    ``example.com/cert`` becomes ``https://example.com/cert``; the ``#``
    placeholder and unsafe schemes become ``""``. Root-relative paths and
    ``mailto:``/``tel:`` links are kept as they are.
    """
    url = normalize_safe_url(value)
    if not url or url == "#":
        return ""
    if _KNOWN_SCHEME.match(url) or url.startswith("/"):
        return url
    return f"https://{url}"


def normalize_hex_color(value: Any, fallback: str) -> str:
    color = clean_text(value)
    return color if _HEX_COLOR.match(color) else fallback


def slugify(value: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")
