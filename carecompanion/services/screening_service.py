"""
Screening Session Service

Stores M-CHAT-R/F answers for a child and scores them on submission.
A session is in_progress until submitted; a submitted session is final
and a re-take needs a new session.
"""

import logging
import time
from uuid import UUID
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from carecompanion.models.screening import ScreeningSession
from carecompanion.schemas.screening import ScreeningAnswer, SessionStatus
from carecompanion.screening.questions import get_question_by_id
from carecompanion.screening.scoring import ScreeningResult, score_responses

logger = logging.getLogger(__name__)


class SessionStateError(Exception):
    """Raised when a session is modified after it has been submitted."""


class InvalidAnswerError(ValueError):
    """Raised for answers that reference a question outside the bank."""


def _now_ms() -> int:
    return int(time.time() * 1000)


def _serialize(answers: list[ScreeningAnswer]) -> list[dict]:
    now = _now_ms()
    return [
        {
            "question_id": a.question_id,
            "answer": a.answer.value,
            "timestamp": a.timestamp if a.timestamp is not None else now,
        }
        for a in answers
    ]


class ScreeningService:
    """Service for screening sessions and their results."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_session(self, session_id: UUID) -> Optional[ScreeningSession]:
        return await self.db.get(ScreeningSession, session_id)

    async def get_session_by_key(self, parent_id: UUID, session_key: str) -> Optional[ScreeningSession]:
        result = await self.db.execute(
            select(ScreeningSession).where(
                ScreeningSession.parent_id == parent_id,
                ScreeningSession.session_key == session_key,
            )
        )
        return result.scalar_one_or_none()

    async def start_session(self, child_id: UUID, parent_id: UUID) -> ScreeningSession:
        """Open a new in-progress session with no answers."""
        session = ScreeningSession(
            child_id=child_id,
            parent_id=parent_id,
            status=SessionStatus.IN_PROGRESS.value,
            responses=[],
        )
        self.db.add(session)
        await self.db.commit()
        await self.db.refresh(session)

        logger.info(f"Started screening session {session.id} for child {child_id}")
        return session

    async def record_answers(
        self,
        session: ScreeningSession,
        answers: list[ScreeningAnswer],
    ) -> ScreeningSession:
        """
        Record answers on an in-progress session.

        A later answer to the same question replaces the earlier one, so the
        stored list holds at most one answer per question.

        Raises:
            SessionStateError: If the session was already submitted
            InvalidAnswerError: If an answer references an unknown question
        """
        self._ensure_in_progress(session)

        unknown = sorted({a.question_id for a in answers if get_question_by_id(a.question_id) is None})
        if unknown:
            raise InvalidAnswerError(f"Unknown question ids: {unknown}")

        merged = {r["question_id"]: r for r in session.responses or []}
        for record in _serialize(answers):
            merged[record["question_id"]] = record

        # Reassign so the JSON column is flagged dirty
        session.responses = list(merged.values())
        await self.db.commit()
        await self.db.refresh(session)
        return session

    async def submit_session(
        self,
        session: ScreeningSession,
        answers: Optional[list[ScreeningAnswer]] = None,
    ) -> ScreeningResult:
        """
        Score an in-progress session and mark it submitted.

        Raises:
            SessionStateError: If the session was already submitted
        """
        if answers:
            session = await self.record_answers(session, answers)
        self._ensure_in_progress(session)

        stored = [ScreeningAnswer.model_validate(r) for r in session.responses or []]
        result = score_responses(stored)
        await self._store_result(session, result)
        return result

    async def submit_responses(
        self,
        child_id: UUID,
        parent_id: UUID,
        session_key: str,
        responses: list[ScreeningAnswer],
    ) -> tuple[ScreeningSession, ScreeningResult]:
        """
        Store and score a complete answer set in one step.

        Answers are kept exactly as submitted, including repeats and ids
        outside the bank; the scorer skips or counts them as it does for
        any input.

        Raises:
            SessionStateError: If this parent already submitted ``session_key``
        """
        existing = await self.get_session_by_key(parent_id, session_key)
        if existing is not None:
            logger.warning(f"Rejected resubmission of screening session {session_key}")
            raise SessionStateError(f"Screening session {session_key} was already submitted")

        session = ScreeningSession(
            child_id=child_id,
            parent_id=parent_id,
            session_key=session_key,
            status=SessionStatus.IN_PROGRESS.value,
            responses=_serialize(responses),
        )
        self.db.add(session)

        result = score_responses(responses)
        try:
            await self._store_result(session, result)
        except IntegrityError:
            # A concurrent submission with the same key committed first
            await self.db.rollback()
            logger.warning(f"Rejected concurrent submission of screening session {session_key}")
            raise SessionStateError(f"Screening session {session_key} was already submitted")
        return session, result

    async def get_history(self, child_id: UUID) -> list[ScreeningSession]:
        """Submitted sessions for a child, newest first."""
        result = await self.db.execute(
            select(ScreeningSession)
            .where(
                ScreeningSession.child_id == child_id,
                ScreeningSession.status == SessionStatus.SUBMITTED.value,
            )
            .order_by(ScreeningSession.completed_at.desc())
        )
        return list(result.scalars().all())

    # ==========================================================================
    # Private Helper Methods
    # ==========================================================================

    def _ensure_in_progress(self, session: ScreeningSession) -> None:
        if session.status != SessionStatus.IN_PROGRESS.value:
            logger.warning(f"Rejected change to submitted screening session {session.id}")
            raise SessionStateError(f"Screening session {session.id} was already submitted")

    async def _store_result(self, session: ScreeningSession, result: ScreeningResult) -> None:
        session.total_score = result.total_score
        session.critical_failures = result.critical_failures
        session.risk_level = result.risk_level.value
        session.follow_up_required = result.follow_up_required
        session.completed_at = datetime.now(timezone.utc)
        session.status = SessionStatus.SUBMITTED.value

        await self.db.commit()
        await self.db.refresh(session)

        logger.info(
            f"Scored screening session {session.id}: total={result.total_score} "
            f"critical={result.critical_failures} risk={result.risk_level.value}"
        )
