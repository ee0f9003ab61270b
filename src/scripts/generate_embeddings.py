"""Populate embedding columns for the knowledge tables.

Run once after loading content, and again whenever rows change:

    python -m src.scripts.generate_embeddings [--table faq ...]
"""

import argparse
import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from src.config.settings import Settings, get_settings
from src.infrastructure.database.connection import ConnectionPool, execute_insert, execute_query
from src.infrastructure.database.helpers import check_write_result, to_vector_literal
from src.infrastructure.embedding.provider import EmbeddingProvider, get_embedding_provider
from src.infrastructure.logging.logger import setup_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableSpec:
    """A knowledge table and how to render one of its rows for embedding."""

    name: str
    build_text: Callable[[dict[str, Any]], str]


def _qa_text(row: dict[str, Any]) -> str:
    return f"Question: {row.get('question')}\nAnswer: {row.get('answer')}\nCategory: {row.get('category') or ''}"


def _law_text(row: dict[str, Any]) -> str:
    return (
        f"{row.get('title')} - {row.get('section') or ''}\n"
        f"{row.get('content')}\nType: {row.get('law_type') or ''}"
    )


def _wage_rule_text(row: dict[str, Any]) -> str:
    return (
        f"{row.get('rule_name')}: {row.get('description')}\n"
        f"Formula: {row.get('formula') or 'N/A'}\nType: {row.get('rule_type')}"
    )


TABLES: tuple[TableSpec, ...] = (
    TableSpec("rights_guide", _qa_text),
    TableSpec("employment_laws", _law_text),
    TableSpec("faq", _qa_text),
    TableSpec("wage_rules", _wage_rule_text),
)


async def embed_table(settings: Settings, embedder: EmbeddingProvider, spec: TableSpec) -> int:
    """Embed every row of one table and write the vectors back. Returns rows updated."""
    logger.info("Processing %s", spec.name)
    # Table names come from TABLES, never from user input
    rows = await execute_query(settings, f"SELECT * FROM {spec.name}", max_retries=3)
    if not rows:
        logger.warning("No data found in %s", spec.name)
        return 0

    logger.info("Found %d rows in %s, generating embeddings", len(rows), spec.name)
    vectors = await embedder.embed_batch([spec.build_text(row) for row in rows])

    updated = 0
    for i, (row, vector) in enumerate(zip(rows, vectors), start=1):
        result = await execute_insert(
            settings,
            f"UPDATE {spec.name} SET embedding = $1::text::vector WHERE id = $2",
            (to_vector_literal(vector), row["id"]),
        )
        if check_write_result(result, f"update embedding for {spec.name} id={row['id']}"):
            updated += 1
        if i % 10 == 0:
            logger.info("%s: %d/%d", spec.name, i, len(rows))

    logger.info("Updated %d/%d rows in %s", updated, len(rows), spec.name)
    return updated


async def generate_embeddings(settings: Settings, table_names: list[str] | None = None) -> dict[str, int]:
    """Embed the selected tables (all of them by default)."""
    specs = [t for t in TABLES if not table_names or t.name in table_names]
    embedder = get_embedding_provider(settings)
    counts: dict[str, int] = {}
    try:
        for spec in specs:
            counts[spec.name] = await embed_table(settings, embedder, spec)
    finally:
        await ConnectionPool.close()
    return counts


async def main() -> None:
    parser = argparse.ArgumentParser(description="Generate knowledge-base embeddings")
    parser.add_argument(
        "--table",
        action="append",
        choices=[t.name for t in TABLES],
        help="Only process this table (repeatable)",
    )
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(level=settings.log_level, json_output=False)

    counts = await generate_embeddings(settings, args.table)
    logger.info("All embeddings generated: %s", counts)


if __name__ == "__main__":
    asyncio.run(main())
