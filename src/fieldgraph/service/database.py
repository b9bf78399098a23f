"""
Database utilities for fieldgraph.

Provides:
- AsyncSession configuration
- Base model class
- Session dependency for FastAPI
"""

from __future__ import annotations

import os
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from ..config import DEFAULT_DATABASE_URL


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


# Engine and session factory (initialized lazily)
_database_url: Optional[str] = None
_engine: Optional[AsyncEngine] = None
_async_session_maker: Optional[async_sessionmaker[AsyncSession]] = None


def configure_database(url: str):
    """Point the engine at a database URL. Takes effect on next get_engine()."""
    global _database_url, _engine, _async_session_maker
    _database_url = url
    _engine = None
    _async_session_maker = None


def get_database_url() -> str:
    """Get database URL from configuration or environment."""
    return _database_url or os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


def get_engine() -> AsyncEngine:
    """Get or create async engine."""
    global _engine
    if _engine is None:
        _engine = create_async_engine(
            get_database_url(),
            echo=os.getenv("SQL_ECHO", "").lower() == "true",
        )
    return _engine


def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get or create session maker."""
    global _async_session_maker
    if _async_session_maker is None:
        _async_session_maker = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _async_session_maker


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that yields database session."""
    session_maker = get_session_maker()
    async with session_maker() as session:
        yield session


async def init_db():
    """Initialize database (create tables)."""
    # Import models so they are registered on Base.metadata
    from . import models  # noqa: F401

    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db():
    """Close database connections."""
    global _engine, _async_session_maker
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _async_session_maker = None
