"""Tests for chatbot, wage, insights and health endpoints."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_chatbot
from src.app import app
from src.config.constants import SourceType
from src.config.starter_questions import STARTER_QUESTIONS
from src.services.answer.models import ChatResponse


@pytest.fixture
def chatbot():
    bot = MagicMock()
    bot.chat = AsyncMock(
        return_value=ChatResponse(
            answer="No, your passport belongs to you.",
            source_type=SourceType.DATABASE,
            citations=["Passports-Act-1966"],
            response_time=42,
        )
    )
    return bot


@pytest.fixture
def client(chatbot):
    app.dependency_overrides[get_chatbot] = lambda: chatbot
    yield TestClient(app)
    app.dependency_overrides.clear()


# ==========================================
#  CHAT
# ==========================================


def test_chat_returns_camel_case(client, chatbot):
    response = client.post(
        "/api/chatbot/chat",
        json={"question": "Can my employer keep my passport?", "language": "ms", "sessionId": "s-1"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "answer": "No, your passport belongs to you.",
        "sourceType": "database",
        "citations": ["Passports-Act-1966"],
        "responseTime": 42,
    }
    chatbot.chat.assert_awaited_once_with(
        "Can my employer keep my passport?", language="ms", session_id="s-1"
    )


def test_chat_defaults_language_and_session(client, chatbot):
    response = client.post("/api/chatbot/chat", json={"question": "hi"})

    assert response.status_code == 200
    chatbot.chat.assert_awaited_once_with("hi", language="en", session_id=None)


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"question": ""},
        {"question": "x" * 1001},
        {"question": "hello", "language": "fr"},
    ],
)
def test_chat_validation_errors(client, chatbot, body):
    response = client.post("/api/chatbot/chat", json=body)

    assert response.status_code == 422
    chatbot.chat.assert_not_awaited()


def test_chat_internal_error(client, chatbot):
    chatbot.chat.side_effect = RuntimeError("boom")

    response = client.post("/api/chatbot/chat", json={"question": "salary"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to process your question"


# ==========================================
#  WAGE CALCULATOR
# ==========================================


def test_wage_check_with_overtime(client):
    response = client.post("/api/chatbot/wage/check", json={"monthly": 2600, "otHours": 10})

    assert response.status_code == 200
    data = response.json()
    assert len(data["steps"]) == 4
    assert data["citation"] == "[ref:EA-Section-60I]"
    assert data["totalOvertimePay"] == pytest.approx(187.5)


def test_wage_check_without_overtime_omits_total(client):
    response = client.post("/api/chatbot/wage/check", json={"monthly": 2600})

    assert response.status_code == 200
    data = response.json()
    assert len(data["steps"]) == 2
    assert "totalOvertimePay" not in data


@pytest.mark.parametrize(
    "body",
    [{"monthly": 0}, {"monthly": -5}, {"monthly": 2600, "otHours": -1}, {"otHours": 3}],
)
def test_wage_check_validation(client, body):
    response = client.post("/api/chatbot/wage/check", json=body)

    assert response.status_code == 422


# ==========================================
#  STARTER QUESTIONS & HEALTH
# ==========================================


def test_starter_questions_for_language(client):
    response = client.get("/api/chatbot/starter-questions", params={"language": "hi"})

    assert response.status_code == 200
    assert response.json()["questions"] == list(STARTER_QUESTIONS["hi"])


def test_starter_questions_unknown_language_uses_english(client):
    response = client.get("/api/chatbot/starter-questions", params={"language": "zz"})

    assert response.json()["questions"] == list(STARTER_QUESTIONS["en"])


def test_chatbot_health(client):
    response = client.get("/api/chatbot/health")

    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["service"] == "chatbot"
    assert "timestamp" in data


def test_app_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["ok"] is True


# ==========================================
#  INSIGHTS
# ==========================================


@patch("src.api.routers.insights.execute_query", new_callable=AsyncMock)
def test_states(mock_query, client):
    mock_query.return_value = [{"state_code": "JHR", "migrant_number": 300000}]

    response = client.get("/api/insights/states")

    assert response.status_code == 200
    assert response.json() == {"rows": [{"state_code": "JHR", "migrant_number": 300000}]}


@patch("src.api.routers.insights.execute_query", new_callable=AsyncMock)
def test_states_failure(mock_query, client):
    mock_query.side_effect = ConnectionError("db down")

    response = client.get("/api/insights/states")

    assert response.status_code == 500
