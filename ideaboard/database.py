"""
IdeaBoard – Async SQLAlchemy engine, session factory, and declarative base.

The engine lives inside a ``Database`` handle built by the application
factory and kept on ``app.state``; nothing here opens a connection at
import time.
"""

from __future__ import annotations

import logging
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from ideaboard.config import Settings

logger = logging.getLogger(__name__)


# ── Declarative base ──
class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Database:
    """Owns the connection pool and hands out sessions."""

    def __init__(self, url: str, echo: bool = False):
        engine_kwargs = {"echo": echo}

        # PgBouncer in transaction mode does not support prepared statement
        # caching, so turn it off for PostgreSQL.
        if url.startswith("postgresql"):
            engine_kwargs["connect_args"] = {"statement_cache_size": 0}

        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.sessionmaker = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, echo=settings.DEBUG)

    async def connect(self, create_schema: bool = False) -> None:
        """Check the database is reachable, optionally creating all tables."""
        async with self.engine.begin() as conn:
            if create_schema:
                # Import the models so every table is registered on Base.
                import ideaboard.models  # noqa: F401

                await conn.run_sync(Base.metadata.create_all)
            await conn.execute(select(1))
        logger.info(f"Connected to database at {self.engine.url.render_as_string()}")

    async def dispose(self) -> None:
        """Close pooled connections once checked-out ones are returned."""
        await self.engine.dispose()
        logger.info("Database connections closed")

    def session(self) -> AsyncSession:
        return self.sessionmaker()


# ── Dependency for FastAPI routes ──
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield an async database session, rolled back on error and closed on exit."""
    database: Database = request.app.state.database
    async with database.session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
