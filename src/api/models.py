"""Request/Response models for API endpoints."""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from src.config.constants import MAX_QUESTION_LENGTH, Language, SourceType


class ChatRequest(BaseModel):
    """Request model for chat endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    question: str = Field(
        ..., min_length=1, max_length=MAX_QUESTION_LENGTH, description="User question"
    )
    language: Language = Field(Language.ENGLISH, description="Response language tag")
    session_id: Optional[str] = Field(
        None, alias="sessionId", description="Session identifier for the conversation log"
    )


class ChatResponse(BaseModel):
    """Response model for chat endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    answer: str = Field(..., description="Answer text")
    source_type: SourceType = Field(..., alias="sourceType", description="database, general or off-topic")
    citations: list[str] = Field(default_factory=list, description="Cited context references")
    response_time: int = Field(..., alias="responseTime", description="Elapsed milliseconds")


class WageRequest(BaseModel):
    """Request model for the wage calculator."""

    model_config = ConfigDict(populate_by_name=True)

    monthly: float = Field(..., gt=0, allow_inf_nan=False, description="Monthly salary in RM")
    ot_hours: float = Field(
        0, ge=0, allow_inf_nan=False, alias="otHours", description="Overtime hours worked"
    )


class WageResponse(BaseModel):
    """Response model for the wage calculator."""

    model_config = ConfigDict(populate_by_name=True)

    steps: list[str] = Field(..., description="Human-readable calculation steps")
    citation: str = Field(..., description="Legal reference for the calculation")
    total_overtime_pay: Optional[float] = Field(
        None, alias="totalOvertimePay", description="Unrounded overtime total, absent without overtime"
    )


class StarterQuestionsResponse(BaseModel):
    """Response model for starter questions."""

    questions: list[str] = Field(..., description="Suggested opening questions")


class ChatbotHealthResponse(BaseModel):
    """Response model for the chatbot health endpoint."""

    ok: bool = Field(..., description="Service is up")
    service: str = Field(..., description="Service name")
    timestamp: str = Field(..., description="ISO-8601 time of the check")


class HealthResponse(BaseModel):
    """Response model for the application health endpoint."""

    ok: bool = Field(..., description="Service is up")
    service: str = Field(..., description="Service name")
    time: str = Field(..., description="ISO-8601 time of the check")


class StatesResponse(BaseModel):
    """Response model for state insights."""

    rows: list[dict[str, Any]] = Field(..., description="Rows of v_state_overview")
