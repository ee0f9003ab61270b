"""Database connection utilities."""

from src.infrastructure.database.connection import ConnectionPool, execute_insert, execute_query
from src.infrastructure.database.helpers import check_write_result, ilike_pattern, to_vector_literal

__all__ = [
    "ConnectionPool",
    "check_write_result",
    "execute_insert",
    "execute_query",
    "ilike_pattern",
    "to_vector_literal",
]
