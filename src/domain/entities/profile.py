"""Profile domain entity."""

from dataclasses import dataclass, field

PROFILE_KEY = "default"
DEFAULT_EXPERIENCE_START_YEAR = 2018
DEFAULT_SOCIAL_ICON = "FaGlobe"


@dataclass
class ProfileStat:
    """A headline number shown on the profile (e.g. "Projects" / "40+")."""

    label: str = ""
    value: str = ""


@dataclass
class SocialLink:
    """Link to an external profile."""

    platform: str = ""
    url: str = ""
    icon: str = DEFAULT_SOCIAL_ICON


@dataclass
class Profile:
    """Domain entity for the site owner's profile (single record keyed "default")."""

    name: str = ""
    tagline: str = ""
    bio: str = ""
    profile_photo: str = ""
    experience_start_year: int = DEFAULT_EXPERIENCE_START_YEAR
    profile_photo_focus_x: float = 50.0
    profile_photo_focus_y: float = 50.0
    profile_photo_zoom: float = 1.0
    skills: list[str] = field(default_factory=list)
    stats: list[ProfileStat] = field(default_factory=list)
    socials: list[SocialLink] = field(default_factory=list)
    email: str = ""
    phone: str = ""
    favicon: str = ""
