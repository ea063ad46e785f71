"""Certification badge palettes and provider-based palette resolution."""

from typing import Any

from domain.entities.certification import DEFAULT_PALETTE_CODE

CERTIFICATION_PALETTES: dict[str, dict[str, str]] = {
    "provider-blue": {"text_color": "#3b82f6", "bg_tint": "#3b82f620", "border_tint": "#3b82f655"},
    "provider-cyan": {"text_color": "#06b6d4", "bg_tint": "#06b6d420", "border_tint": "#06b6d455"},
    "provider-green": {"text_color": "#22c55e", "bg_tint": "#22c55e20", "border_tint": "#22c55e55"},
    "provider-emerald": {"text_color": "#10b981", "bg_tint": "#10b98120", "border_tint": "#10b98155"},
    "provider-amber": {"text_color": "#f59e0b", "bg_tint": "#f59e0b20", "border_tint": "#f59e0b55"},
    "provider-orange": {"text_color": "#f97316", "bg_tint": "#f9731620", "border_tint": "#f9731655"},
    "provider-red": {"text_color": "#ef4444", "bg_tint": "#ef444420", "border_tint": "#ef444455"},
    "provider-rose": {"text_color": "#f43f5e", "bg_tint": "#f43f5e20", "border_tint": "#f43f5e55"},
    "provider-violet": {"text_color": "#8b5cf6", "bg_tint": "#8b5cf620", "border_tint": "#8b5cf655"},
    "provider-slate": {"text_color": "#94a3b8", "bg_tint": "#94a3b820", "border_tint": "#94a3b855"},
}

PALETTE_CODES = frozenset(CERTIFICATION_PALETTES)

# First match wins.
PROVIDER_KEYWORDS: list[tuple[tuple[str, ...], str]] = [
    (("microsoft",), "provider-cyan"),
    (("automation anywhere",), "provider-orange"),
    (("accenture",), "provider-violet"),
    (("international scrum institute", "scrum institute"), "provider-amber"),
    (("certiprof",), "provider-green"),
]


def resolve_palette_from_provider(organization: Any) -> str:
    provider = organization.strip().lower() if isinstance(organization, str) else ""
    if not provider:
        return DEFAULT_PALETTE_CODE

    for keywords, palette_code in PROVIDER_KEYWORDS:
        if any(keyword in provider for keyword in keywords):
            return palette_code
    return DEFAULT_PALETTE_CODE


def sanitize_palette_code(palette_code: Any, organization: Any) -> str:
    """Keep a known palette code, otherwise derive one from the organization name."""
    if isinstance(palette_code, str) and palette_code.strip() in PALETTE_CODES:
        return palette_code.strip()
    return resolve_palette_from_provider(organization)
