"""
Async SQLAlchemy session factory for PostgreSQL.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from config.settings import config
from database.models import Base

_connect_args = (
    {"command_timeout": config.db_command_timeout}
    if config.database_url.startswith("postgresql+asyncpg") and config.db_command_timeout
    else {}
)

engine = create_async_engine(
    config.database_url,
    echo=False,
    pool_size=config.db_pool_size,
    max_overflow=config.db_max_overflow,
    pool_recycle=3600,
    connect_args=_connect_args,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency function — use in FastAPI `Depends(get_db_session)`."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_models() -> None:
    """Create any missing tables and indexes."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
