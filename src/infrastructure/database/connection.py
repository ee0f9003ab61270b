"""Postgres connection utilities using asyncpg."""

import asyncio
import logging
from typing import Any, cast

import asyncpg

from src.config.settings import Settings
from src.utils.retry import is_transient_postgres_error, run_with_retry

logger = logging.getLogger(__name__)


class ConnectionPool:
    """Process-wide lazily created asyncpg pool.

    The first caller creates the pool under a lock; concurrent first callers
    wait on the same lock instead of opening a second pool.
    """

    _pool: asyncpg.Pool | None = None
    _lock: asyncio.Lock | None = None

    @classmethod
    async def get_pool(cls, settings: Settings) -> asyncpg.Pool:
        if cls._pool is not None:
            return cls._pool

        if cls._lock is None:
            cls._lock = asyncio.Lock()

        async with cls._lock:
            if cls._pool is not None:
                return cls._pool
            if not settings.database_url:
                raise ValueError("database_url is not configured in settings")

            cls._pool = await asyncpg.create_pool(
                dsn=settings.database_url,
                min_size=settings.db_pool_min_size,
                max_size=settings.db_pool_max_size,
                max_inactive_connection_lifetime=settings.db_pool_idle_lifetime,
                timeout=settings.db_connect_timeout,
                command_timeout=settings.db_command_timeout,
                ssl="require" if "neon.tech" in settings.database_url else None,
            )
            logger.info(
                "Postgres pool created (min=%s, max=%s)",
                settings.db_pool_min_size,
                settings.db_pool_max_size,
            )
            return cls._pool

    @classmethod
    async def close(cls) -> None:
        if cls._pool is None:
            return
        try:
            await cls._pool.close()
            logger.info("Postgres pool closed")
        finally:
            cls._pool = None
            cls._lock = None


def _rows_affected(status: str) -> int:
    """Parse the row count from a command status tag such as ``INSERT 0 1``."""
    parts = status.split()
    if parts and parts[-1].isdigit():
        return int(parts[-1])
    return 0


async def execute_query(
    settings: Settings,
    sql: str,
    params: tuple[Any, ...] | None = None,
    max_retries: int = 1,
) -> list[dict[str, Any]]:
    """
    Execute a SELECT query and return results as a list of dictionaries.

    Args:
        settings: Application settings containing database_url
        sql: SQL query string (use $1, $2 placeholders for parameters)
        params: Optional tuple of parameters for parameterized queries
        max_retries: Attempts for transient connection errors; 1 disables retry

    Returns:
        List of dictionaries, where each dictionary represents a row with column names as keys

    Raises:
        Exception: If database connection or query execution fails
    """

    async def _execute() -> list[dict[str, Any]]:
        pool = await ConnectionPool.get_pool(settings)
        async with pool.acquire() as conn:
            records = await conn.fetch(sql, *(params or ()))
        return [dict(record) for record in records]

    return cast(
        list[dict[str, Any]],
        await run_with_retry(
            _execute,
            max_retries=max_retries,
            initial_delay=0.5,
            backoff_factor=2.0,
        ),
    )


async def execute_insert(
    settings: Settings,
    sql: str,
    params: tuple[Any, ...] | None = None,
    max_retries: int = 3,
    initial_delay: float = 1.0,
) -> dict[str, Any]:
    """
    Execute an INSERT, UPDATE, or DELETE statement.

    Args:
        settings: Application settings containing database_url
        sql: SQL statement (use $1, $2 placeholders for parameters)
        params: Optional tuple of parameters
        max_retries: Attempts for transient connection errors
        initial_delay: Delay before the first retry, in seconds

    Returns:
        Dictionary with success status and affected row count:
        {
            "success": bool,
            "rows_affected": int,
            "error": str | None
        }
    """

    async def _execute() -> dict[str, Any]:
        pool = await ConnectionPool.get_pool(settings)
        try:
            async with pool.acquire() as conn:
                status = await conn.execute(sql, *(params or ()))
        except Exception as e:
            # Transient errors bubble up so run_with_retry can handle them
            if is_transient_postgres_error(e):
                raise
            logger.error("Database insert/update error: %s", e)
            return {"success": False, "rows_affected": 0, "error": str(e)}
        return {"success": True, "rows_affected": _rows_affected(status), "error": None}

    return cast(
        dict[str, Any],
        await run_with_retry(
            _execute,
            max_retries=max_retries,
            initial_delay=initial_delay,
            backoff_factor=2.0,
        ),
    )
