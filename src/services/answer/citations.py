"""Citation extraction from generated answers."""

import re
from collections.abc import Iterable

from src.services.retrieval.models import RetrievedContext

CITATION_RE = re.compile(r"\[ref:([^\]]+)\]")


def extract_citations(answer: str, contexts: Iterable[RetrievedContext]) -> list[str]:
    """
    Collect ``[ref:X]`` markers from an answer.

    Markers are returned in order of appearance with duplicates kept. Only
    references that belong to the supplied contexts are returned, so a marker
    the model made up is dropped, and no contexts means no citations.
    """
    allowed = {ctx.reference for ctx in contexts if ctx.reference}
    if not allowed:
        return []
    return [ref for ref in CITATION_RE.findall(answer) if ref in allowed]


def context_references(contexts: Iterable[RetrievedContext]) -> list[str]:
    """Non-empty references of the given contexts, in order."""
    return [ctx.reference for ctx in contexts if ctx.reference]
