"""Tests for background conversation logging."""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from src.config.constants import SourceType
from src.infrastructure.logging import conversation_logger
from src.infrastructure.logging.conversation_logger import (
    INSERT_CONVERSATION_SQL,
    drain_pending_saves,
    save_conversation,
    schedule_conversation_save,
)
from src.services.answer.models import ChatResponse


@pytest.fixture
def response():
    return ChatResponse(
        answer="Overtime is 1.5 times [ref:EA-60A].",
        source_type=SourceType.DATABASE,
        citations=["EA-60A"],
        response_time=812,
    )


class TestSaveConversation:
    @pytest.mark.asyncio
    async def test_inserts_all_columns(self, settings, response):
        insert = AsyncMock(return_value={"success": True, "rows_affected": 1, "error": None})
        with patch.object(conversation_logger, "execute_insert", insert):
            saved = await save_conversation(settings, "s-1", "What is overtime?", response, "ms")

        assert saved is True
        args = insert.await_args.args
        assert args[1] == INSERT_CONVERSATION_SQL
        assert args[2] == ("s-1", "What is overtime?", response.answer, "database", "ms", 812, ["EA-60A"])
        assert insert.await_args.kwargs == {"max_retries": 3, "initial_delay": 0.0}

    @pytest.mark.asyncio
    async def test_failed_write_returns_false(self, settings, response):
        insert = AsyncMock(return_value={"success": False, "rows_affected": 0, "error": "no table"})
        with patch.object(conversation_logger, "execute_insert", insert):
            assert await save_conversation(settings, "s-1", "q", response, "en") is False


class TestScheduleConversationSave:
    @pytest.mark.asyncio
    async def test_runs_in_background(self, settings, response):
        started = asyncio.Event()

        async def slow_insert(*_args, **_kwargs):
            started.set()
            await asyncio.sleep(0.01)
            return {"success": True, "rows_affected": 1, "error": None}

        with patch.object(conversation_logger, "execute_insert", side_effect=slow_insert):
            task = schedule_conversation_save(settings, "s-1", "q", response, "en")
            assert not task.done()
            await drain_pending_saves(timeout=1)

        assert started.is_set()
        assert task.done()
        assert task not in conversation_logger._pending

    @pytest.mark.asyncio
    async def test_failure_is_swallowed(self, settings, response):
        insert = AsyncMock(side_effect=ConnectionError("db down"))
        with patch.object(conversation_logger, "execute_insert", insert):
            task = schedule_conversation_save(settings, "s-1", "q", response, "en")
            await task

        assert task.exception() is None

    @pytest.mark.asyncio
    async def test_drain_with_nothing_pending(self):
        await drain_pending_saves(timeout=0.01)
