"""
M-CHAT-R/F Scoring

Turns a list of yes/no answers into a total score and a risk tier.
Pure functions only: no I/O, no shared state, safe to call concurrently.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Iterable, TYPE_CHECKING

from carecompanion.screening.questions import get_question_by_id, concerning_answer

if TYPE_CHECKING:
    from carecompanion.schemas.screening import ScreeningAnswer


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Thresholds are inclusive. High is checked before medium.
HIGH_RISK_TOTAL_SCORE = 8
HIGH_RISK_CRITICAL_FAILURES = 3
MEDIUM_RISK_TOTAL_SCORE = 3
MEDIUM_RISK_CRITICAL_FAILURES = 2


@dataclass(frozen=True)
class ScreeningResult:
    total_score: int
    critical_failures: int
    risk_level: RiskLevel
    follow_up_required: bool

    def to_dict(self) -> dict:
        data = asdict(self)
        data["risk_level"] = self.risk_level.value
        return data


def classify_risk(total_score: int, critical_failures: int) -> RiskLevel:
    if total_score >= HIGH_RISK_TOTAL_SCORE or critical_failures >= HIGH_RISK_CRITICAL_FAILURES:
        return RiskLevel.HIGH
    if total_score >= MEDIUM_RISK_TOTAL_SCORE or critical_failures >= MEDIUM_RISK_CRITICAL_FAILURES:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def score_responses(answers: Iterable["ScreeningAnswer"]) -> ScreeningResult:
    """
    Score a set of M-CHAT-R/F answers.

    Every answer is scored on its own: answers for ids outside the question
    bank are skipped, and repeated question ids are each counted.

    Args:
        answers: Objects exposing ``question_id`` and ``answer`` ("yes"/"no")

    Returns:
        ScreeningResult with the total, critical failures, and risk tier
    """
    total_score = 0
    critical_failures = 0

    for answer in answers:
        question = get_question_by_id(answer.question_id)
        if question is None:
            continue

        if answer.answer == concerning_answer(question.id):
            total_score += 1
            if question.critical:
                critical_failures += 1

    risk_level = classify_risk(total_score, critical_failures)

    return ScreeningResult(
        total_score=total_score,
        critical_failures=critical_failures,
        risk_level=risk_level,
        follow_up_required=risk_level != RiskLevel.LOW,
    )
