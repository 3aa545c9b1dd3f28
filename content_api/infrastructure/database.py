"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to ContentStoreError (core/errors.py)
    - close() disposes the engine exactly once; later calls are no-ops

Design Decisions:
    - Singleton db_manager initialized by the app lifespan and handed to
      routes through get_db (no global import side effects)
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DisconnectionError, IntegrityError, InterfaceError, OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

from content_api.core.errors import ContentStoreError, StoreErrorKind

logger = logging.getLogger(__name__)


def classify_sqlalchemy_error(exc: SQLAlchemyError) -> StoreErrorKind:
    """Map a SQLAlchemy exception onto a store error kind."""
    if isinstance(exc, IntegrityError):
        return StoreErrorKind.CONSTRAINT_VIOLATION
    if isinstance(exc, (OperationalError, InterfaceError, DisconnectionError)):
        return StoreErrorKind.CONNECTION_FAILURE
    return StoreErrorKind.UNKNOWN


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str | None = None,
        pool_size: int = 5,
        max_overflow: int = 10,
        engine: AsyncEngine | None = None,
    ):
        if engine is None:
            if database_url is None:
                raise ValueError("database_url or engine is required")
            engine = self._create_engine(database_url, pool_size, max_overflow)
        self.engine: AsyncEngine | None = engine
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @staticmethod
    def _create_engine(
        database_url: str, pool_size: int, max_overflow: int,
    ) -> AsyncEngine:
        engine_kwargs = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        return create_async_engine(database_url, **engine_kwargs)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            kind = classify_sqlalchemy_error(e)
            logger.error(
                f"DB error: {e}", extra={"error_kind": kind.value},
            )
            raise ContentStoreError(kind, "execute", type(e).__name__) from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (used by the readiness route)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        """Dispose the engine and its pooled connections."""
        if self.engine is None:
            return
        await self.engine.dispose()
        self.engine = None


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager is None:
        return
    await db_manager.close()
    db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
