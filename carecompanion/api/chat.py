"""
Chat API Endpoints

Guidance assistant replies and chat session history.
"""

from uuid import UUID
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from carecompanion.database import get_db
from carecompanion.models.chat import ChatSession
from carecompanion.api.deps import get_current_user_id, get_child_for_user
from carecompanion.schemas.chat import (
    AssistantRequest,
    AssistantReply,
    ChatRequest,
    ChatReply,
    ChatSessionCreate,
    ChatMessagesAppend,
    ChatSessionResponse,
)
from carecompanion.services.chat_service import ChatService
from carecompanion.services.assistant_service import AssistantService

router = APIRouter(prefix="/chat", tags=["Chat"])


async def get_owned_chat_session(
    session_id: UUID,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> ChatSession:
    session = await ChatService(db).get_session(session_id)
    if not session or session.user_id != user_id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Chat session not found",
        )
    return session


# =============================================================================
# Assistant
# =============================================================================

@router.post("/respond", response_model=AssistantReply)
async def respond(
    data: AssistantRequest,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
):
    """Generate a reply without saving it."""
    service = AssistantService(db)
    response = await service.generate_response(data.message, data.context)
    return AssistantReply(response=response)


@router.post("", response_model=ChatReply)
async def chat(
    data: ChatRequest,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
):
    """
    Generate a reply and save the exchange.

    With a session_id the exchange is appended to that session; otherwise a
    new session is created. A child_id adds the child's screening and
    progress context to the prompt.
    """
    child = await get_child_for_user(db, data.child_id, user_id) if data.child_id else None

    session = None
    if data.session_id:
        session = await get_owned_chat_session(data.session_id, db=db, user_id=user_id)

    service = AssistantService(db)
    session, response = await service.chat(
        user_id=user_id,
        message=data.message,
        session=session,
        child=child,
        session_type=data.session_type,
    )
    return ChatReply(session_id=session.id, response=response)


# =============================================================================
# Sessions
# =============================================================================

@router.get("/sessions", response_model=list[ChatSessionResponse])
async def list_sessions(
    child_id: Optional[UUID] = Query(None, description="Only sessions about this child"),
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
):
    """List the caller's 20 most recently active sessions."""
    if child_id:
        await get_child_for_user(db, child_id, user_id)

    service = ChatService(db)
    return await service.get_sessions(user_id, child_id=child_id)


@router.post("/sessions", response_model=ChatSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(
    data: ChatSessionCreate,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
):
    """Create a chat session."""
    if data.child_id:
        await get_child_for_user(db, data.child_id, user_id)

    service = ChatService(db)
    return await service.create_session(data, user_id=user_id)


@router.get("/sessions/{session_id}", response_model=ChatSessionResponse)
async def get_session(session: ChatSession = Depends(get_owned_chat_session)):
    """Get a chat session with its messages."""
    return session


@router.post("/sessions/{session_id}/messages", response_model=ChatSessionResponse)
async def append_messages(
    data: ChatMessagesAppend,
    session: ChatSession = Depends(get_owned_chat_session),
    db: AsyncSession = Depends(get_db),
):
    """Append messages to a chat session."""
    service = ChatService(db)
    return await service.append_messages(session, data.messages)
