"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Portfolio API")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Content storage
    storage_backend: str = Field(
        default="database",
        description="Where content records live: 'database' or 'json'",
    )
    database_url: str = Field(
        default="postgresql+asyncpg://localhost:5432/portfolio",
        description="PostgreSQL connection URL with asyncpg driver",
    )
    database_auto_create: bool = Field(
        default=False,
        description="Create missing tables on startup (local SQLite; use migrations elsewhere)",
    )
    data_dir: Path = Field(
        default=Path("data"),
        description="Directory holding one JSON file per collection (json backend)",
    )

    # Media storage
    media_backend: str = Field(
        default="local",
        description="Where uploaded media lives: 'local' or 'supabase'",
    )
    public_dir: Path = Field(
        default=Path("public"),
        description="Directory served as the site root; media goes under images/",
    )
    media_bucket: str = Field(default="images")
    upload_max_bytes: int = Field(default=5 * 1024 * 1024)
    media_cleanup_interval_hours: int = Field(
        default=0,
        description="Run a full orphaned media sweep every N hours (0 disables)",
    )

    # Supabase
    supabase_url: str = Field(
        default="",
        description="Supabase project URL (e.g. https://xyzabc.supabase.co)",
    )
    supabase_service_role_key: str = Field(
        default="",
        description="Supabase service role key (server-side only, keep secret)",
    )

    # JWT Authentication
    jwt_secret_key: str = Field(
        default="CHANGE-ME-IN-PRODUCTION",
        description="Secret key for signing admin session tokens (HS256)",
    )
    jwt_algorithm: str = Field(default="HS256")
    jwt_expire_minutes: int = Field(default=60 * 24)
    auth_cookie_name: str = Field(default="admin_token")

    # Admin credentials
    admin_email: str = Field(default="")
    admin_password_hash: str = Field(
        default="",
        description="bcrypt hash of the admin password",
    )

    # Contact mail
    smtp_host: str = Field(default="smtp.gmail.com")
    smtp_port: int = Field(default=587)
    smtp_secure: bool = Field(default=False)
    smtp_user: str = Field(default="")
    smtp_password: str = Field(default="")
    contact_to_email: str = Field(default="")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def supabase_jwks_url(self) -> str:
        """JWKS endpoint for ES256 token verification."""
        if self.supabase_url:
            return f"{self.supabase_url.rstrip('/')}/auth/v1/.well-known/jwks.json"
        return ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def supabase_public_media_prefix(self) -> str:
        """Public URL prefix of objects in the media bucket."""
        if self.supabase_url:
            return (
                f"{self.supabase_url.rstrip('/')}/storage/v1/object/public/"
                f"{self.media_bucket}/"
            )
        return ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def smtp_use_tls(self) -> bool:
        """Implicit TLS is used on port 465 or when explicitly requested."""
        return self.smtp_secure or self.smtp_port == 465

    # Rate Limiting
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable/disable rate limiting (disable for tests)",
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed origins",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
