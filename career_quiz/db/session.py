from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..core.config import database_settings
from .models import Base


def get_async_engine(db_url: str = database_settings.url) -> AsyncEngine:
    """Creates an asynchronous SQLAlchemy engine instance."""
    options = {"echo": database_settings.echo}
    if not db_url.startswith("sqlite"):
        # SQLite's default pool does not take these arguments
        options.update(pool_size=10, max_overflow=20, pool_pre_ping=True, pool_recycle=1800)
    return create_async_engine(db_url, **options)


def get_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Creates an asynchronous session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False, # Important for async usage, especially with FastAPI
    )


# Create engine and session factory instances
async_engine = get_async_engine()
SessionFactory = get_session_factory(async_engine)


async def init_models(engine: AsyncEngine = async_engine) -> None:
    """Creates missing tables. Deployments on PostgreSQL use the Alembic migrations instead."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency to provide a database session.

    Handles session creation, commit, rollback, and closing.
    """
    async with SessionFactory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
