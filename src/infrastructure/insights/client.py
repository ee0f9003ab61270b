"""HTTP client for the state insights endpoint."""

import logging
from typing import Any

import httpx

from src.config.settings import Settings

logger = logging.getLogger(__name__)


async def fetch_state_rows(settings: Settings) -> list[dict[str, Any]]:
    """GET the insights states endpoint and return its ``rows`` list.

    Raises:
        httpx.HTTPError: On transport failure or non-2xx status
    """
    async with httpx.AsyncClient(timeout=settings.insights_timeout) as client:
        response = await client.get(settings.insights_api_url)
        response.raise_for_status()
        payload = response.json()
    rows = payload.get("rows", []) if isinstance(payload, dict) else []
    logger.debug("Fetched %d state rows from insights endpoint", len(rows))
    return rows
