"""
Retry utilities for handling rate limits and transient errors.
"""

import asyncio
import logging
import re
from collections.abc import Callable
from typing import Any

import asyncpg

logger = logging.getLogger(__name__)


# SQLSTATE codes that represent transient errors worth retrying.
# All other Postgres errors (syntax, missing table, permission, etc.) are permanent.
_TRANSIENT_SQLSTATES: frozenset[str] = frozenset({
    "08000",  # Connection exception
    "08001",  # Unable to establish connection
    "08003",  # Connection does not exist
    "08006",  # Connection failure
    "40001",  # Serialization failure
    "40P01",  # Deadlock detected
    "53300",  # Too many connections
    "57P01",  # Admin shutdown
})


def is_transient_postgres_error(exception: BaseException) -> bool:
    """Check if a Postgres error is transient and worth retrying.

    Reads the SQLSTATE from asyncpg's ``sqlstate`` attribute and checks it
    against the known set of transient codes. Dropped connections surface as
    ``ConnectionDoesNotExistError`` or plain ``ConnectionError``/``OSError``
    and are also treated as transient.
    """
    if isinstance(exception, (asyncpg.exceptions.ConnectionDoesNotExistError, ConnectionError)):
        return True
    if isinstance(exception, asyncpg.PostgresError):
        sqlstate = getattr(exception, "sqlstate", None)
        return sqlstate in _TRANSIENT_SQLSTATES
    return False


async def run_with_retry(
    func: Callable[[], Any],
    max_retries: int = 3,
    initial_delay: float = 5.0,
    backoff_factor: float = 2.0,
    retry_on_rate_limit: bool = True,
) -> Any:
    """
    Execute an async function with retry logic for rate limit and transient errors.

    Args:
        func: Async function to execute (no parameters)
        max_retries: Maximum number of attempts
        initial_delay: Initial delay in seconds before first retry
        backoff_factor: Multiplier for delay between retries
        retry_on_rate_limit: Whether to retry on rate limit and transient errors

    Returns:
        Result from the function

    Raises:
        Exception: If max retries exceeded or non-retryable error occurs
    """
    last_exception: Exception | None = None

    for attempt in range(max_retries):
        try:
            return await func()
        except Exception as e:
            last_exception = e

            is_transient_db = is_transient_postgres_error(e)

            error_str = str(e).lower()
            is_rate_limit = "rate limit" in error_str or "rate_limit" in error_str
            is_connection_error = (
                isinstance(e, (TimeoutError, asyncio.TimeoutError))
                or is_transient_db
                or "connection reset" in error_str
                or "connection refused" in error_str
                or "timeout expired" in error_str
            )

            should_retry = (is_rate_limit or is_connection_error) and retry_on_rate_limit

            if should_retry and attempt < max_retries - 1:
                wait_time_match = re.search(r"(\d+)\s{0,10}seconds?", str(e), re.IGNORECASE)
                if wait_time_match:
                    wait_time = float(wait_time_match.group(1))
                else:
                    wait_time = initial_delay * (backoff_factor**attempt)

                error_type = "transient DB" if is_transient_db else "connection/timeout"
                logger.warning(
                    "Transient %s error detected (%s). Attempt %s/%s. Waiting %.1f seconds before retry...",
                    error_type,
                    e,
                    attempt + 1,
                    max_retries,
                    wait_time,
                )
                await asyncio.sleep(wait_time)
                continue

            raise

    if last_exception:
        raise last_exception
    raise RuntimeError("Max retries exceeded")
