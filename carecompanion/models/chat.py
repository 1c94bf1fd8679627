from sqlalchemy import String, ForeignKey, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from uuid import UUID, uuid4
from datetime import datetime
from typing import Optional

from carecompanion.models.base import Base, TimestampMixin, JSONType, utcnow


class ChatSession(Base, TimestampMixin):
    """Conversation with the guidance assistant, optionally scoped to a child."""

    __tablename__ = "chat_sessions"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(index=True, nullable=False)
    child_id: Mapped[Optional[UUID]] = mapped_column(
        ForeignKey("children.id", ondelete="CASCADE"), index=True, nullable=True
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    session_type: Mapped[str] = mapped_column(String(20), default="general")  # general, assessment, therapy

    # [{"role", "content", "timestamp", "message_id"}, ...]
    messages: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    last_activity: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<ChatSession {self.title}>"
