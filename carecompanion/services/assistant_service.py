"""
Guidance Assistant Service

Generates assistant replies from an opaque text-completion service and
keeps the exchange in a chat session.
"""

import json
import logging
import time
from uuid import UUID, uuid4
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from carecompanion.llm.client import LLMClient
from carecompanion.llm.prompts import GUIDANCE_SYSTEM, NO_CONTEXT, FALLBACK_RESPONSE
from carecompanion.models.child import Child
from carecompanion.models.chat import ChatSession
from carecompanion.schemas.chat import (
    AssistantContext,
    ChatMessage,
    ChatSessionCreate,
    ChatSessionType,
    MessageRole,
)
from carecompanion.services.chat_service import ChatService
from carecompanion.services.child_service import age_in_months
from carecompanion.services.progress_service import ProgressService
from carecompanion.services.screening_service import ScreeningService

logger = logging.getLogger(__name__)

TITLE_LENGTH = 50
RECENT_ASSESSMENT_LIMIT = 3


def make_title(message: str) -> str:
    if len(message) > TITLE_LENGTH:
        return message[:TITLE_LENGTH] + "..."
    return message


def _message(role: MessageRole, content: str, timestamp: int) -> ChatMessage:
    prefix = "user" if role == MessageRole.USER else "ai"
    return ChatMessage(
        role=role,
        content=content,
        timestamp=timestamp,
        message_id=f"{prefix}_{timestamp}_{uuid4().hex[:9]}",
    )


class AssistantService:
    """Service for assistant replies and chat persistence."""

    def __init__(self, db: AsyncSession, llm: Optional[LLMClient] = None):
        self.db = db
        self.llm = llm or LLMClient()
        self.chat_service = ChatService(db)

    async def generate_response(
        self,
        message: str,
        context: Optional[AssistantContext] = None,
    ) -> str:
        """
        Ask the completion service for a reply.

        Never raises: on any failure the error is logged and a fixed
        apology is returned instead.
        """
        context_text = NO_CONTEXT
        if context is not None:
            context_text = json.dumps(context.model_dump(exclude_none=True))

        messages = [
            {"role": "system", "content": GUIDANCE_SYSTEM.format(context=context_text)},
            {"role": "user", "content": message},
        ]

        try:
            return await self.llm.complete_text(messages)
        except Exception as e:
            logger.error(f"Assistant response generation failed: {e}")
            return FALLBACK_RESPONSE

    async def build_child_context(self, child: Child) -> AssistantContext:
        """Summarize a child's age, recent screenings, and progress for the assistant."""
        history = await ScreeningService(self.db).get_history(child.id)
        recent = [
            f"{s.completed_at.date().isoformat()}: {s.risk_level} risk (score {s.total_score})"
            for s in history[:RECENT_ASSESSMENT_LIMIT]
        ]

        stats = await ProgressService(self.db).get_stats(child.id)

        return AssistantContext(
            child_age=age_in_months(child.date_of_birth),
            recent_assessments=recent,
            progress_data=json.dumps(stats.to_dict()),
        )

    async def chat(
        self,
        user_id: UUID,
        message: str,
        session: Optional[ChatSession] = None,
        child: Optional[Child] = None,
        session_type: ChatSessionType = ChatSessionType.GENERAL,
    ) -> tuple[ChatSession, str]:
        """
        Reply to a message and save both sides of the exchange.

        Appends to ``session`` when given, otherwise opens a new session
        titled after the message.
        """
        context = await self.build_child_context(child) if child else None
        reply = await self.generate_response(message, context)

        now = int(time.time() * 1000)
        exchange = [
            _message(MessageRole.USER, message, now),
            _message(MessageRole.ASSISTANT, reply, now + 1),
        ]

        if session is not None:
            session = await self.chat_service.append_messages(session, exchange)
        else:
            session = await self.chat_service.create_session(
                ChatSessionCreate(
                    child_id=child.id if child else None,
                    title=make_title(message),
                    messages=exchange,
                    session_type=session_type,
                ),
                user_id=user_id,
            )

        logger.info(f"Saved assistant exchange to chat session {session.id}")
        return session, reply
