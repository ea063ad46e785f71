"""SQLAlchemy ORM models."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import JSON, DateTime, Float, Integer, String, Text, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from domain.entities.certification import DEFAULT_BADGE_COLOR, DEFAULT_PALETTE_CODE
from domain.entities.profile import DEFAULT_EXPERIENCE_START_YEAR, PROFILE_KEY
from domain.entities.service import DEFAULT_SERVICE_ICON

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests).
JSONType = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class ProfileModel(Base):
    """Site profile, a single row keyed "default"."""

    __tablename__ = "profile"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=PROFILE_KEY)
    name: Mapped[str] = mapped_column(String(200), default="")
    tagline: Mapped[str] = mapped_column(String(500), default="")
    bio: Mapped[str] = mapped_column(Text, default="")
    profile_photo: Mapped[str] = mapped_column(Text, default="")
    experience_start_year: Mapped[int] = mapped_column(
        Integer, default=DEFAULT_EXPERIENCE_START_YEAR
    )
    profile_photo_focus_x: Mapped[float] = mapped_column(Float, default=50.0)
    profile_photo_focus_y: Mapped[float] = mapped_column(Float, default=50.0)
    profile_photo_zoom: Mapped[float] = mapped_column(Float, default=1.0)
    skills: Mapped[list[Any]] = mapped_column(JSONType, default=list)
    stats: Mapped[list[Any]] = mapped_column(JSONType, default=list)
    socials: Mapped[list[Any]] = mapped_column(JSONType, default=list)
    email: Mapped[str] = mapped_column(String(255), default="")
    phone: Mapped[str] = mapped_column(String(64), default="")
    favicon: Mapped[str] = mapped_column(Text, default="")
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )


class ProjectModel(Base):
    """Portfolio project model."""

    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    title: Mapped[str] = mapped_column(String(300), default="")
    categories: Mapped[list[Any]] = mapped_column(JSONType, default=list)
    description: Mapped[str] = mapped_column(Text, default="")
    thumbnail: Mapped[str] = mapped_column(Text, default="")
    thumbnail_focus_x: Mapped[float] = mapped_column(Float, default=50.0)
    thumbnail_focus_y: Mapped[float] = mapped_column(Float, default=50.0)
    thumbnail_zoom: Mapped[float] = mapped_column(Float, default=1.0)
    gallery: Mapped[list[Any]] = mapped_column(JSONType, default=list)
    attachments: Mapped[list[Any]] = mapped_column(JSONType, default=list)
    links: Mapped[list[Any]] = mapped_column(JSONType, default=list)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )


class ProjectCategoryModel(Base):
    """Managed project category model."""

    __tablename__ = "project_categories"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    label: Mapped[str] = mapped_column(String(200), nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, index=True)


class CertificationModel(Base):
    """Certification model."""

    __tablename__ = "certifications"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(300), default="")
    year: Mapped[str] = mapped_column(String(32), default="")
    organization: Mapped[str] = mapped_column(String(300), default="")
    description: Mapped[str] = mapped_column(Text, default="")
    credential_url: Mapped[str] = mapped_column(Text, default="")
    credential_id: Mapped[str] = mapped_column(String(200), default="")
    thumbnail: Mapped[str] = mapped_column(Text, default="")
    attachments: Mapped[list[Any]] = mapped_column(JSONType, default=list)
    palette_code: Mapped[str] = mapped_column(String(32), default=DEFAULT_PALETTE_CODE)
    badge_color: Mapped[str] = mapped_column(String(16), default=DEFAULT_BADGE_COLOR)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )


class ServiceModel(Base):
    """Offered service model."""

    __tablename__ = "services"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    number: Mapped[str] = mapped_column(String(16), default="")
    title: Mapped[str] = mapped_column(String(200), default="")
    description: Mapped[str] = mapped_column(Text, default="")
    icon: Mapped[str] = mapped_column(Text, default=DEFAULT_SERVICE_ICON)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, index=True)


class ContactSubmissionModel(Base):
    """Contact form submission model."""

    __tablename__ = "contact_submissions"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), default="")
    subject: Mapped[str] = mapped_column(String(300), nullable=False)
    message_text: Mapped[str] = mapped_column(Text, nullable=False)
    message_html: Mapped[str] = mapped_column(Text, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
