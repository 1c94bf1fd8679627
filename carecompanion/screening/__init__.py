"""
Screening Module

M-CHAT-R/F question bank and scoring.
"""

from carecompanion.screening.questions import (
    MCHAT_QUESTIONS,
    INVERTED_ITEMS,
    AnswerValue,
    Question,
    QuestionCategory,
    get_question_by_id,
)
from carecompanion.screening.scoring import (
    RiskLevel,
    ScreeningResult,
    classify_risk,
    score_responses,
)

__all__ = [
    "MCHAT_QUESTIONS",
    "INVERTED_ITEMS",
    "AnswerValue",
    "Question",
    "QuestionCategory",
    "get_question_by_id",
    "RiskLevel",
    "ScreeningResult",
    "classify_risk",
    "score_responses",
]
