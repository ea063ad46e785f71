"""create_portfolio_tables

Revision ID: 4c1e7a9d2b10
Revises:
Create Date: 2026-10-19 10:12:41.508113

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "4c1e7a9d2b10"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

JSONB = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    """Create content tables: profile, projects, categories, certifications, services, contact."""
    op.create_table(
        "profile",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False, server_default=""),
        sa.Column("tagline", sa.String(length=500), nullable=False, server_default=""),
        sa.Column("bio", sa.Text(), nullable=False, server_default=""),
        sa.Column("profile_photo", sa.Text(), nullable=False, server_default=""),
        sa.Column("experience_start_year", sa.Integer(), nullable=False, server_default="2018"),
        sa.Column("profile_photo_focus_x", sa.Float(), nullable=False, server_default="50"),
        sa.Column("profile_photo_focus_y", sa.Float(), nullable=False, server_default="50"),
        sa.Column("profile_photo_zoom", sa.Float(), nullable=False, server_default="1"),
        sa.Column("skills", JSONB, nullable=False),
        sa.Column("stats", JSONB, nullable=False),
        sa.Column("socials", JSONB, nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("phone", sa.String(length=64), nullable=False, server_default=""),
        sa.Column("favicon", sa.Text(), nullable=False, server_default=""),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "projects",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("title", sa.String(length=300), nullable=False, server_default=""),
        sa.Column("categories", JSONB, nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("thumbnail", sa.Text(), nullable=False, server_default=""),
        sa.Column("thumbnail_focus_x", sa.Float(), nullable=False, server_default="50"),
        sa.Column("thumbnail_focus_y", sa.Float(), nullable=False, server_default="50"),
        sa.Column("thumbnail_zoom", sa.Float(), nullable=False, server_default="1"),
        sa.Column("gallery", JSONB, nullable=False),
        sa.Column("attachments", JSONB, nullable=False),
        sa.Column("links", JSONB, nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_projects_sort_order", "projects", ["sort_order"], unique=False)

    op.create_table(
        "project_categories",
        sa.Column("id", sa.String(length=128), nullable=False),
        sa.Column("label", sa.String(length=200), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_project_categories_sort_order", "project_categories", ["sort_order"], unique=False
    )

    op.create_table(
        "certifications",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=300), nullable=False, server_default=""),
        sa.Column("year", sa.String(length=32), nullable=False, server_default=""),
        sa.Column("organization", sa.String(length=300), nullable=False, server_default=""),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("credential_url", sa.Text(), nullable=False, server_default=""),
        sa.Column("credential_id", sa.String(length=200), nullable=False, server_default=""),
        sa.Column("thumbnail", sa.Text(), nullable=False, server_default=""),
        sa.Column("attachments", JSONB, nullable=False),
        sa.Column(
            "palette_code", sa.String(length=32), nullable=False, server_default="provider-slate"
        ),
        sa.Column("badge_color", sa.String(length=16), nullable=False, server_default="#8b5cf6"),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_certifications_sort_order", "certifications", ["sort_order"], unique=False
    )

    op.create_table(
        "services",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("number", sa.String(length=16), nullable=False, server_default=""),
        sa.Column("title", sa.String(length=200), nullable=False, server_default=""),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("icon", sa.Text(), nullable=False, server_default="FaCode"),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_services_sort_order", "services", ["sort_order"], unique=False)

    op.create_table(
        "contact_submissions",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("subject", sa.String(length=300), nullable=False),
        sa.Column("message_text", sa.Text(), nullable=False),
        sa.Column("message_html", sa.Text(), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    # Newest first for the inbox view
    op.create_index(
        "ix_contact_submissions_created",
        "contact_submissions",
        [sa.text("created_at DESC")],
        unique=False,
    )


def downgrade() -> None:
    """Drop content tables."""
    op.drop_index("ix_contact_submissions_created", table_name="contact_submissions")
    op.drop_table("contact_submissions")
    op.drop_index("ix_services_sort_order", table_name="services")
    op.drop_table("services")
    op.drop_index("ix_certifications_sort_order", table_name="certifications")
    op.drop_table("certifications")
    op.drop_index("ix_project_categories_sort_order", table_name="project_categories")
    op.drop_table("project_categories")
    op.drop_index("ix_projects_sort_order", table_name="projects")
    op.drop_table("projects")
    op.drop_table("profile")
