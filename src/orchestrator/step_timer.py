"""Async context manager for timing and logging pipeline steps."""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from src.config.constants import ChatStep
from src.infrastructure.logging.logger import StructuredLogger


class StepContext:
    """Mutable context for a timed pipeline step."""

    def __init__(self) -> None:
        self.details: dict[str, Any] = {}
        self.elapsed_ms: float = 0.0

    def set_details(self, **details: Any) -> None:
        self.details.update(details)


@asynccontextmanager
async def timed_step(
    step: ChatStep,
    logger: StructuredLogger,
) -> AsyncGenerator[StepContext, None]:
    """Time a pipeline step and log its details, or the error that ended it."""
    ctx = StepContext()
    start = time.perf_counter()
    try:
        yield ctx
    except Exception as e:
        ctx.elapsed_ms = (time.perf_counter() - start) * 1000
        logger.log_error(step.value, e, context={**ctx.details, "duration_ms": ctx.elapsed_ms})
        raise
    ctx.elapsed_ms = (time.perf_counter() - start) * 1000
    logger.log_step(step.value, ctx.details, duration_ms=ctx.elapsed_ms)
