"""Profile normalization."""

from typing import Any

from domain.entities.profile import (
    DEFAULT_EXPERIENCE_START_YEAR,
    DEFAULT_SOCIAL_ICON,
    Profile,
    ProfileStat,
    SocialLink,
)
from domain.normalizers.common import (
    as_list,
    as_mapping,
    clean_text,
    coerce_text,
    dedupe_labels,
    normalize_focus,
    normalize_safe_url,
    normalize_zoom,
    parse_int,
)
from domain.normalizers.html import coerce_legacy_html

MIN_EXPERIENCE_START_YEAR = 1900


def normalize_experience_start_year(value: Any) -> int:
    parsed = parse_int(value)
    if parsed is None or parsed < MIN_EXPERIENCE_START_YEAR:
        return DEFAULT_EXPERIENCE_START_YEAR
    return parsed


def normalize_stats(value: Any) -> list[ProfileStat]:
    return [
        ProfileStat(label=clean_text(item.get("label")), value=coerce_text(item.get("value")))
        for item in as_list(value)
        if isinstance(item, dict)
    ]


def normalize_socials(value: Any) -> list[SocialLink]:
    return [
        SocialLink(
            platform=clean_text(item.get("platform")),
            url=normalize_safe_url(item.get("url")),
            icon=clean_text(item.get("icon")) or DEFAULT_SOCIAL_ICON,
        )
        for item in as_list(value)
        if isinstance(item, dict)
    ]


def normalize_profile(raw: Any) -> Profile:
    """Coerce a loosely typed profile payload into a fully populated :class:`Profile`."""
    data = as_mapping(raw)
    return Profile(
        name=clean_text(data.get("name")),
        tagline=clean_text(data.get("tagline")),
        bio=coerce_legacy_html(data.get("bio")),
        profile_photo=clean_text(data.get("profilePhoto")),
        experience_start_year=normalize_experience_start_year(data.get("experienceStartYear")),
        profile_photo_focus_x=normalize_focus(data.get("profilePhotoFocusX")),
        profile_photo_focus_y=normalize_focus(data.get("profilePhotoFocusY")),
        profile_photo_zoom=normalize_zoom(data.get("profilePhotoZoom")),
        skills=dedupe_labels(data.get("skills")),
        stats=normalize_stats(data.get("stats")),
        socials=normalize_socials(data.get("socials")),
        email=clean_text(data.get("email")),
        phone=clean_text(data.get("phone")),
        favicon=clean_text(data.get("favicon")),
    )
