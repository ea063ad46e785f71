"""Pydantic schemas for Profile API."""

from pydantic import ConfigDict

from api.v1.schemas.common import CamelModel


class ProfileStatResponse(CamelModel):
    label: str
    value: str


class SocialLinkResponse(CamelModel):
    platform: str
    url: str
    icon: str


class ProfileResponse(CamelModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "tagline": "Automation Developer",
                "bio": "<p>Building things.</p>",
                "profilePhoto": "/images/profile/photo.svg",
                "experienceStartYear": 2018,
                "profilePhotoFocusX": 50,
                "profilePhotoFocusY": 50,
                "profilePhotoZoom": 1,
                "skills": ["Python", "RPA"],
                "stats": [{"label": "Projects", "value": "40+"}],
                "socials": [
                    {"platform": "GitHub", "url": "https://github.com/jane", "icon": "FaGithub"}
                ],
                "email": "jane@example.com",
                "phone": "",
                "favicon": "",
            }
        },
    )

    name: str
    tagline: str
    bio: str
    profile_photo: str
    experience_start_year: int
    profile_photo_focus_x: float
    profile_photo_focus_y: float
    profile_photo_zoom: float
    skills: list[str]
    stats: list[ProfileStatResponse]
    socials: list[SocialLinkResponse]
    email: str
    phone: str
    favicon: str
