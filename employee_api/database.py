"""
Employee API — Connection Pool
================================

What:  Shared, bounded pool of database connections plus the single query
       entry point used by every handler.
How:   Wraps a SQLAlchemy AsyncEngine (created lazily on first use). Each
       execute() checks out one connection, runs one statement inside its own
       transaction, materializes the rows and returns the connection.
Who:   One ConnectionPool per application instance, stored on app.state and
       handed to services through FastAPI's dependency injection.
When:  Engine is built on the first query; disposed at application shutdown.

Connection Pooling Strategy:
    pool_size:       Persistent connections for normal load
    max_overflow:    Temporary connections for traffic spikes
    pool_pre_ping:   Validates connections before use (catches stale connections)
    pool_recycle:    Recycles long-lived connections

    SQLite URLs (used by the test suite) keep the dialect's own pool class,
    so the sizing arguments are only passed for server databases.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from employee_api.config import settings
from employee_api.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for SQLAlchemy table declarations.

    The service layer talks SQL directly; the declarations document the
    table shape and let tests build a throwaway schema from Base.metadata.
    """
    pass


@dataclass(frozen=True)
class ResultMetadata:
    """What a statement did, beyond the rows it returned."""

    affected_rows: int
    returns_rows: bool


Row = Dict[str, Any]


class ConnectionPool:
    """
    Process-wide pool of database connections.

    Contract:
        execute(sql, parameters) -> (rows, metadata)

        - Safe to call concurrently from many in-flight requests.
        - Parameters are bound by name through SQLAlchemy text(); they are
          never formatted into the statement.
        - Raises DatabaseConnectionError when no connection can be opened.
          Any other failure (constraint, type, syntax) propagates as the
          driver's SQLAlchemy exception. Nothing is retried.
    """

    def __init__(
        self,
        url: Union[str, URL],
        pool_size: int = 10,
        max_overflow: int = 5,
        pool_pre_ping: bool = True,
        pool_recycle: int = 3600,
        echo: bool = False,
    ):
        self.url = make_url(url) if isinstance(url, str) else url
        self._pool_size = pool_size
        self._max_overflow = max_overflow
        self._pool_pre_ping = pool_pre_ping
        self._pool_recycle = pool_recycle
        self._echo = echo
        self._engine: Optional[AsyncEngine] = None

    @classmethod
    def from_settings(cls) -> "ConnectionPool":
        """Builds a pool from the application settings singleton."""
        return cls(
            settings.sqlalchemy_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=settings.db_pool_recycle,
            echo=settings.log_level == "DEBUG",
        )

    @property
    def engine(self) -> AsyncEngine:
        """The underlying AsyncEngine, created on first access."""
        if self._engine is None:
            kwargs: Dict[str, Any] = {
                "pool_pre_ping": self._pool_pre_ping,
                "echo": self._echo,
            }
            if self.url.get_backend_name() != "sqlite":
                kwargs.update(
                    pool_size=self._pool_size,
                    max_overflow=self._max_overflow,
                    pool_recycle=self._pool_recycle,
                )
            self._engine = create_async_engine(self.url, **kwargs)
            logger.info(
                "Database pool created for %s",
                self.url.render_as_string(hide_password=True),
            )
        return self._engine

    async def execute(
        self,
        sql: str,
        parameters: Optional[Mapping[str, Any]] = None,
    ) -> Tuple[List[Row], ResultMetadata]:
        """
        Run one statement on a pooled connection.

        Args:
            sql: Statement text with :name placeholders
            parameters: Values for the placeholders

        Returns:
            (rows, metadata): rows as column → value dicts (empty when the
            statement returns none) and the affected row count.

        Raises:
            DatabaseConnectionError: The store could not be reached.
        """
        try:
            conn = await self.engine.connect()
        except (DBAPIError, OSError, asyncio.TimeoutError) as e:
            logger.error("Could not connect to the database: %s", str(e))
            raise DatabaseConnectionError(
                context={"original_error": type(e).__name__},
            ) from e

        try:
            async with conn.begin():
                result = await conn.execute(text(sql), dict(parameters or {}))
                if result.returns_rows:
                    rows = [dict(row) for row in result.mappings().all()]
                else:
                    rows = []
                metadata = ResultMetadata(
                    affected_rows=result.rowcount,
                    returns_rows=result.returns_rows,
                )
        finally:
            await conn.close()

        return rows, metadata

    async def ping(self) -> bool:
        """Returns True when a trivial query round-trips to the store."""
        try:
            rows, _ = await self.execute("SELECT 1 AS ok")
        except Exception as e:
            logger.warning("Database ping failed: %s", str(e))
            return False
        return bool(rows)

    async def dispose(self) -> None:
        """Closes every pooled connection. A later query recreates the engine."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None


# ── Dependency ────────────────────────────────────────────────────────────
def get_pool(request: Request) -> ConnectionPool:
    """FastAPI dependency returning the pool owned by the running application."""
    return request.app.state.pool
