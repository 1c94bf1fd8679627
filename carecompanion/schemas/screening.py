from pydantic import BaseModel, Field, AliasChoices
from datetime import datetime
from uuid import UUID
from typing import Optional
from enum import Enum

from carecompanion.screening.questions import AnswerValue, QuestionCategory
from carecompanion.screening.scoring import RiskLevel


class SessionStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    SUBMITTED = "submitted"


# Question bank
class QuestionResponse(BaseModel):
    id: int
    text: str
    category: QuestionCategory
    critical: bool


class QuestionBankResponse(BaseModel):
    questions: list[QuestionResponse]
    total: int
    critical_question_ids: list[int]


# Answers
class ScreeningAnswer(BaseModel):
    """One yes/no answer. Accepts ``questionId`` as well as ``question_id``."""
    question_id: int = Field(validation_alias=AliasChoices("question_id", "questionId"))
    answer: AnswerValue
    timestamp: Optional[int] = None  # capture time, epoch milliseconds


class AnswersRecord(BaseModel):
    answers: list[ScreeningAnswer] = Field(min_length=1)


class SessionSubmit(BaseModel):
    answers: Optional[list[ScreeningAnswer]] = None


class ScreeningSubmission(BaseModel):
    """One-shot submission keyed by a client-generated session id."""
    child_id: UUID = Field(validation_alias=AliasChoices("child_id", "childId"))
    session_id: str = Field(
        min_length=1,
        max_length=100,
        validation_alias=AliasChoices("session_id", "sessionId"),
    )
    responses: list[ScreeningAnswer]


# Results
class ScreeningResultResponse(BaseModel):
    session_id: UUID
    total_score: int
    critical_failures: int
    risk_level: RiskLevel
    follow_up_required: bool


class ScreeningSessionResponse(BaseModel):
    id: UUID
    child_id: UUID
    session_key: Optional[str]
    status: SessionStatus
    responses: list[ScreeningAnswer]
    answered_count: int
    total_score: Optional[int]
    critical_failures: Optional[int]
    risk_level: Optional[RiskLevel]
    follow_up_required: Optional[bool]
    completed_at: Optional[datetime]
    created_at: datetime

    class Config:
        from_attributes = True
