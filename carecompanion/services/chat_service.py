from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Optional

from carecompanion.models.chat import ChatSession
from carecompanion.models.base import utcnow
from carecompanion.schemas.chat import ChatSessionCreate, ChatMessage

RECENT_SESSION_LIMIT = 20


class ChatService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_sessions(
        self,
        user_id: UUID,
        child_id: Optional[UUID] = None,
    ) -> list[ChatSession]:
        """Most recently active sessions for a user, optionally for one child."""
        query = select(ChatSession).where(ChatSession.user_id == user_id)
        if child_id:
            query = query.where(ChatSession.child_id == child_id)

        query = query.order_by(ChatSession.last_activity.desc()).limit(RECENT_SESSION_LIMIT)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_session(self, session_id: UUID) -> Optional[ChatSession]:
        return await self.db.get(ChatSession, session_id)

    async def create_session(self, data: ChatSessionCreate, user_id: UUID) -> ChatSession:
        session = ChatSession(
            user_id=user_id,
            child_id=data.child_id,
            title=data.title,
            session_type=data.session_type.value,
            messages=[m.model_dump(mode="json") for m in data.messages],
            last_activity=utcnow(),
        )
        self.db.add(session)
        await self.db.commit()
        await self.db.refresh(session)
        return session

    async def append_messages(
        self,
        session: ChatSession,
        messages: list[ChatMessage],
    ) -> ChatSession:
        session.messages = list(session.messages or []) + [m.model_dump(mode="json") for m in messages]
        session.last_activity = utcnow()
        await self.db.commit()
        await self.db.refresh(session)
        return session
