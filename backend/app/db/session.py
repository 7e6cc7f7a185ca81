"""
Async SQLAlchemy engine and session factories.

The app shares one pooled engine.  Celery tasks and scripts run inside
their own `asyncio.run()` loop and build a short-lived engine with
`standalone_session()` so connections never cross event loops.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import settings

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=(settings.APP_ENV == "development"),
    pool_size=20,
    max_overflow=10,
    pool_pre_ping=True,
)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncIterator[AsyncSession]:
    """Dependency that yields an async DB session, committing on success."""
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


@asynccontextmanager
async def standalone_session() -> AsyncIterator[AsyncSession]:
    """Session on a throwaway engine; commits on success, disposes on exit."""
    local_engine = create_async_engine(settings.DATABASE_URL, echo=False)
    factory = async_sessionmaker(local_engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with factory() as session:
            async with session.begin():
                yield session
    finally:
        await local_engine.dispose()
