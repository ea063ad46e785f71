"""Database engine and session factory."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from core.config import settings
from infrastructure.database.models import Base


def engine_options(database_url: str) -> dict[str, Any]:
    """Driver-specific engine arguments for ``database_url``."""
    connect_args: dict[str, Any] = {}
    # Supavisor runs in transaction mode; asyncpg's prepared statement
    # cache does not survive that.
    if "pooler.supabase.com" in database_url or "supabase.com" in database_url:
        connect_args["statement_cache_size"] = 0
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        return {"connect_args": connect_args}
    return {"pool_pre_ping": True, "connect_args": connect_args}


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    return create_async_engine(database_url, echo=echo, **engine_options(database_url))


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


engine = build_engine(settings.database_url, echo=settings.debug)
async_session_factory = build_session_factory(engine)


async def create_schema(bind: AsyncEngine = engine) -> None:
    """Create any missing tables. Local SQLite setups use this instead of migrations."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
