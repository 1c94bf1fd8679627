"""
Screening API Endpoints

M-CHAT-R/F question bank, screening sessions, and scored results.
"""

from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from carecompanion.database import get_db
from carecompanion.models.child import Child
from carecompanion.models.screening import ScreeningSession
from carecompanion.api.deps import get_current_user_id, get_child_for_user, get_owned_child
from carecompanion.schemas.screening import (
    QuestionBankResponse,
    QuestionResponse,
    AnswersRecord,
    SessionSubmit,
    ScreeningSubmission,
    ScreeningResultResponse,
    ScreeningSessionResponse,
)
from carecompanion.screening.questions import MCHAT_QUESTIONS, get_critical_question_ids
from carecompanion.services.screening_service import (
    ScreeningService,
    SessionStateError,
    InvalidAnswerError,
)

router = APIRouter(prefix="/screening", tags=["Screening"])


async def get_owned_session(
    session_id: UUID,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> ScreeningSession:
    session = await ScreeningService(db).get_session(session_id)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Screening session not found",
        )
    if session.parent_id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to access this screening session",
        )
    return session


def _result_response(session: ScreeningSession) -> ScreeningResultResponse:
    return ScreeningResultResponse(
        session_id=session.id,
        total_score=session.total_score,
        critical_failures=session.critical_failures,
        risk_level=session.risk_level,
        follow_up_required=session.follow_up_required,
    )


# =============================================================================
# Question Bank
# =============================================================================

@router.get("/questions", response_model=QuestionBankResponse)
async def get_questions():
    """Get the M-CHAT-R/F items in administration order."""
    return QuestionBankResponse(
        questions=[QuestionResponse(**q.to_dict()) for q in MCHAT_QUESTIONS],
        total=len(MCHAT_QUESTIONS),
        critical_question_ids=get_critical_question_ids(),
    )


# =============================================================================
# One-shot Submission
# =============================================================================

@router.post("/responses", response_model=ScreeningResultResponse, status_code=status.HTTP_201_CREATED)
async def submit_responses(
    data: ScreeningSubmission,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
):
    """Score and store a complete set of answers under a client-chosen session id."""
    child = await get_child_for_user(db, data.child_id, user_id)

    service = ScreeningService(db)
    try:
        session, _ = await service.submit_responses(
            child_id=child.id,
            parent_id=user_id,
            session_key=data.session_id,
            responses=data.responses,
        )
    except SessionStateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    return _result_response(session)


# =============================================================================
# Session Lifecycle
# =============================================================================

@router.post(
    "/children/{child_id}/sessions",
    response_model=ScreeningSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def start_session(
    child: Child = Depends(get_owned_child),
    db: AsyncSession = Depends(get_db),
):
    """Start a new screening session for a child."""
    service = ScreeningService(db)
    return await service.start_session(child.id, parent_id=child.parent_id)


@router.get("/sessions/{session_id}", response_model=ScreeningSessionResponse)
async def get_session(session: ScreeningSession = Depends(get_owned_session)):
    """Get a screening session with its answers and, once submitted, its result."""
    return session


@router.put("/sessions/{session_id}/answers", response_model=ScreeningSessionResponse)
async def record_answers(
    data: AnswersRecord,
    session: ScreeningSession = Depends(get_owned_session),
    db: AsyncSession = Depends(get_db),
):
    """Record answers on an in-progress session. Re-answering a question replaces it."""
    service = ScreeningService(db)
    try:
        return await service.record_answers(session, data.answers)
    except SessionStateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except InvalidAnswerError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


@router.post("/sessions/{session_id}/submit", response_model=ScreeningResultResponse)
async def submit_session(
    data: SessionSubmit,
    session: ScreeningSession = Depends(get_owned_session),
    db: AsyncSession = Depends(get_db),
):
    """Score the session. A submitted session cannot be changed or resubmitted."""
    service = ScreeningService(db)
    try:
        await service.submit_session(session, data.answers)
    except SessionStateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except InvalidAnswerError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    return _result_response(session)


# =============================================================================
# History
# =============================================================================

@router.get("/children/{child_id}/history", response_model=list[ScreeningSessionResponse])
async def get_history(
    child: Child = Depends(get_owned_child),
    db: AsyncSession = Depends(get_db),
):
    """Get a child's submitted screenings, newest first."""
    service = ScreeningService(db)
    return await service.get_history(child.id)
