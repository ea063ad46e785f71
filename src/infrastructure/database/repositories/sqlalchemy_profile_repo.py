"""SQLAlchemy implementation of Profile repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.payload import to_payload
from domain.entities.profile import PROFILE_KEY, Profile
from domain.normalizers.profile import normalize_profile
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self) -> Profile | None:
        """Get the stored profile."""
        model = await self._session.get(ProfileModel, PROFILE_KEY)
        return self._to_entity(model) if model else None

    async def put(self, profile: Profile) -> Profile:
        """Create or replace the profile row."""
        model = await self._session.get(ProfileModel, PROFILE_KEY)
        if model is None:
            model = ProfileModel(id=PROFILE_KEY)
            self._session.add(model)

        payload = to_payload(profile)
        model.name = profile.name
        model.tagline = profile.tagline
        model.bio = profile.bio
        model.profile_photo = profile.profile_photo
        model.experience_start_year = profile.experience_start_year
        model.profile_photo_focus_x = profile.profile_photo_focus_x
        model.profile_photo_focus_y = profile.profile_photo_focus_y
        model.profile_photo_zoom = profile.profile_photo_zoom
        model.skills = list(profile.skills)
        model.stats = payload["stats"]
        model.socials = payload["socials"]
        model.email = profile.email
        model.phone = profile.phone
        model.favicon = profile.favicon

        await self._session.flush()
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return normalize_profile(
            {
                "name": model.name,
                "tagline": model.tagline,
                "bio": model.bio,
                "profilePhoto": model.profile_photo,
                "experienceStartYear": model.experience_start_year,
                "profilePhotoFocusX": model.profile_photo_focus_x,
                "profilePhotoFocusY": model.profile_photo_focus_y,
                "profilePhotoZoom": model.profile_photo_zoom,
                "skills": model.skills,
                "stats": model.stats,
                "socials": model.socials,
                "email": model.email,
                "phone": model.phone,
                "favicon": model.favicon,
            }
        )
