"""State insights client."""

from src.infrastructure.insights.client import fetch_state_rows

__all__ = ["fetch_state_rows"]
