"""State insights endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from src.api.models import StatesResponse
from src.config.settings import Settings, get_settings
from src.infrastructure.database.connection import execute_query

logger = logging.getLogger(__name__)

router = APIRouter()

STATES_OVERVIEW_SQL = """
    SELECT state_code, state_name_en, migrant_number, risk_level,
           manuf_perc_in_state, const_perc_in_state, agric_percent_in_state
    FROM v_state_overview
    ORDER BY state_code
"""


@router.get("/states", response_model=StatesResponse)
async def states(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Migrant worker statistics for every state."""
    try:
        rows = await execute_query(settings, STATES_OVERVIEW_SQL)
    except Exception as e:
        logger.error("Error fetching states data: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch states data") from e
    return {"rows": rows}
