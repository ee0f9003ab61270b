"""Tests for ILIKE keyword search and the insights fallback."""

from unittest.mock import AsyncMock

import pytest

from src.services.retrieval.keyword_search import (
    EMPLOYMENT_LAWS_SQL,
    FAQ_SQL,
    RIGHTS_GUIDE_SQL,
    STATES_OVERVIEW_SQL,
    STATES_SQL,
    KeywordSearcher,
    format_state,
    state_name_matches,
)

SELANGOR = {
    "state_code": "SGR",
    "state_name_en": "Selangor",
    "migrant_number": 512345,
    "risk_level": "High",
    "manuf_perc_in_state": 40,
    "const_perc_in_state": 30,
    "agric_percent_in_state": 5,
}


def _make_query(tables: dict[str, list[dict]], fail_on: set[str] | None = None):
    """Fake execute_query keyed by SQL statement."""
    fail_on = fail_on or set()
    calls: list[tuple[str, tuple | None]] = []

    async def _query(settings, sql, params=None):
        calls.append((sql, params))
        if sql in fail_on:
            raise RuntimeError(f"boom: {sql[:20]}")
        return tables.get(sql, [])

    _query.calls = calls
    return _query


# ==========================================
#  FORMATTING HELPERS
# ==========================================


def test_format_state_content_and_reference():
    ctx = format_state(SELANGOR)
    assert ctx.content == (
        "State: Selangor - Migrant Workers: 512,345 - Risk Level: High"
        " - Manufacturing: 40% - Construction: 30% - Agriculture: 5%"
    )
    assert ctx.reference == "state-SGR"
    assert ctx.source == "migration_stats"
    assert ctx.id == "SGR"


@pytest.mark.parametrize(
    "name,question,expected",
    [
        ("Selangor", "How many workers in selangor?", True),
        ("Kuala Lumpur", "kuala", True),
        ("Johor", "Tell me about Penang", False),
        ("", "anything", False),
    ],
)
def test_state_name_matches(name, question, expected):
    assert state_name_matches(name, question) is expected


# ==========================================
#  KEYWORD SEARCH
# ==========================================


class TestKeywordSearcher:
    @pytest.mark.asyncio
    async def test_collects_all_tables_in_order(self, settings):
        query = _make_query(
            {
                RIGHTS_GUIDE_SQL: [
                    {"id": 1, "question": "Passport?", "answer": "Keep it.", "law_ref": "Passports-Act"},
                ],
                FAQ_SQL: [{"id": 7, "question": "Leave?", "answer": "8 days."}],
                EMPLOYMENT_LAWS_SQL: [
                    {"id": 3, "title": "Employment Act 1955", "section": "60E", "content": "Annual leave."},
                ],
                STATES_SQL: [SELANGOR],
            }
        )
        searcher = KeywordSearcher(settings, query=query, fetch_states=AsyncMock())

        contexts = await searcher.search("selangor")

        assert [c.source for c in contexts] == [
            "rights_guide",
            "faq",
            "employment_laws",
            "migration_stats",
        ]
        assert contexts[0].content == "Q: Passport?\nA: Keep it."
        assert contexts[0].reference == "Passports-Act"
        assert contexts[1].reference == ""
        assert contexts[2].content == "Employment Act 1955 - 60E: Annual leave."
        assert contexts[2].reference == "Employment Act 1955-60E"
        assert all(params == ("%selangor%",) for _, params in query.calls)

    @pytest.mark.asyncio
    async def test_missing_law_ref_becomes_empty_reference(self, settings):
        query = _make_query(
            {RIGHTS_GUIDE_SQL: [{"id": 1, "question": "Q", "answer": "A", "law_ref": None}]}
        )
        searcher = KeywordSearcher(settings, query=query, fetch_states=AsyncMock())

        contexts = await searcher.search("passport")

        assert contexts[0].reference == ""

    @pytest.mark.asyncio
    async def test_overview_added_when_no_state_matches(self, settings):
        query = _make_query(
            {
                STATES_OVERVIEW_SQL: [
                    {"state_name_en": "Selangor", "migrant_number": 500000, "risk_level": "High"},
                    {"state_name_en": "Johor", "migrant_number": 300000, "risk_level": "Medium"},
                ],
            }
        )
        searcher = KeywordSearcher(settings, query=query, fetch_states=AsyncMock())

        contexts = await searcher.search("migration statistics please")

        assert [c.content for c in contexts] == [
            "Selangor: 500,000 migrant workers (High risk)",
            "Johor: 300,000 migrant workers (Medium risk)",
        ]
        assert all(c.reference == "states-overview" and c.id == 0 for c in contexts)

    @pytest.mark.asyncio
    async def test_no_overview_without_statistics_terms(self, settings):
        query = _make_query({STATES_OVERVIEW_SQL: [{"state_name_en": "X", "migrant_number": 1, "risk_level": "Low"}]})
        searcher = KeywordSearcher(settings, query=query, fetch_states=AsyncMock())

        contexts = await searcher.search("passport rules")

        assert contexts == []
        assert STATES_OVERVIEW_SQL not in [sql for sql, _ in query.calls]

    @pytest.mark.asyncio
    async def test_states_failure_uses_insights_endpoint(self, settings):
        query = _make_query({}, fail_on={STATES_SQL})
        johor = {**SELANGOR, "state_code": "JHR", "state_name_en": "Johor"}
        fetch_states = AsyncMock(return_value=[SELANGOR, johor])
        searcher = KeywordSearcher(settings, query=query, fetch_states=fetch_states)

        contexts = await searcher.search("workers in Johor")

        fetch_states.assert_awaited_once_with(settings)
        assert [c.reference for c in contexts] == ["state-JHR"]

    @pytest.mark.asyncio
    async def test_insights_failure_is_ignored(self, settings):
        query = _make_query(
            {FAQ_SQL: [{"id": 1, "question": "Q", "answer": "A"}]},
            fail_on={STATES_SQL},
        )
        fetch_states = AsyncMock(side_effect=ConnectionError("refused"))
        searcher = KeywordSearcher(settings, query=query, fetch_states=fetch_states)

        contexts = await searcher.search("Selangor")

        assert [c.source for c in contexts] == ["faq"]

    @pytest.mark.asyncio
    async def test_other_failure_returns_empty(self, settings):
        query = _make_query(
            {RIGHTS_GUIDE_SQL: [{"id": 1, "question": "Q", "answer": "A", "law_ref": "X"}]},
            fail_on={FAQ_SQL},
        )
        searcher = KeywordSearcher(settings, query=query, fetch_states=AsyncMock())

        assert await searcher.search("anything") == []
