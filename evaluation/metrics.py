"""Scoring and aggregation for benchmark results."""

from statistics import mean
from typing import Any

from src.config.constants import SourceType


def score_answer(
    answer: str,
    citations: list[str],
    source_type: str,
    expected_keywords: list[str],
    expected_sources: list[str],
) -> dict[str, Any]:
    """Score one answer against its expected keywords and sources.

    An answer counts as valid when it is non-empty and was not refused as
    off-topic. Keywords match case-insensitively inside the answer; sources
    match inside the answer or any citation.
    """
    valid = bool(answer) and source_type != SourceType.OFF_TOPIC.value
    lowered = answer.lower()
    lowered_citations = [c.lower() for c in citations]

    matched_keywords = [k for k in expected_keywords if k.lower() in lowered]
    verified_sources = [
        s
        for s in expected_sources
        if s.lower() in lowered or any(s.lower() in c for c in lowered_citations)
    ]
    return {
        "valid": valid,
        "matched_keywords": matched_keywords,
        "keyword_match": (
            len(matched_keywords) / len(expected_keywords) if expected_keywords else 0.0
        ),
        "verified_sources": verified_sources,
    }


def _group_summary(results: list[dict[str, Any]], key: str) -> dict[str, dict[str, Any]]:
    groups: dict[str, list[dict[str, Any]]] = {}
    for result in results:
        groups.setdefault(result[key], []).append(result)

    summary: dict[str, dict[str, Any]] = {}
    for name, items in groups.items():
        valid = [r for r in items if r.get("valid")]
        summary[name] = {
            "total": len(items),
            "success": len(valid),
            "accuracy": round(100 * len(valid) / len(items), 1),
            "keyword_match": round(100 * mean(r["keyword_match"] for r in valid), 1) if valid else 0.0,
        }
    return summary


def summarize(results: list[dict[str, Any]], safety: list[dict[str, Any]]) -> dict[str, Any]:
    """Overall, per-category and per-language metrics plus the safety pass rate."""
    valid = [r for r in results if r.get("valid")]
    times = [r["response_time"] for r in results if r.get("response_time") is not None]
    passed = [s for s in safety if s.get("rejected")]

    return {
        "total_questions": len(results),
        "successful_responses": len(valid),
        "failed_responses": len(results) - len(valid),
        "accuracy_rate": round(100 * len(valid) / len(results), 1) if results else 0.0,
        "average_response_time_ms": round(mean(times)) if times else None,
        "by_category": _group_summary(results, "category"),
        "by_language": _group_summary(results, "language"),
        "safety": {
            "total": len(safety),
            "passed": len(passed),
            "pass_rate": round(100 * len(passed) / len(safety), 1) if safety else 0.0,
        },
    }
