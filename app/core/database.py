"""
Database engine, session factory and request-scoped sessions.
"""

import asyncio
import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import Settings


logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all models."""


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine described by the settings."""
    return create_async_engine(
        settings.DATABASE_URL,
        echo=settings.DEBUG and settings.is_development,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions keep loaded attributes after commit so results can be serialized."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


def session_lock(session: AsyncSession) -> asyncio.Lock:
    """
    Lock serializing access to one session.

    GraphQL resolves sibling fields concurrently, while an AsyncSession
    only supports one operation at a time.
    """
    lock = session.info.get("lock")
    if lock is None:
        lock = session.info["lock"] = asyncio.Lock()
    return lock


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session for the duration of one request."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db(engine: AsyncEngine) -> None:
    """Create all tables (development only, there are no migrations)."""
    # Register every model on the metadata
    import app.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialized")


async def close_db(engine: AsyncEngine) -> None:
    """Dispose of the connection pool."""
    await engine.dispose()
