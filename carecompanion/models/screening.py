from sqlalchemy import String, Integer, Boolean, ForeignKey, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from uuid import UUID, uuid4
from datetime import datetime
from typing import Optional, TYPE_CHECKING

from carecompanion.models.base import Base, TimestampMixin, JSONType

if TYPE_CHECKING:
    from carecompanion.models.child import Child


class ScreeningSession(Base, TimestampMixin):
    """
    One M-CHAT-R/F administration for a child.

    Moves in_progress -> submitted exactly once. The scoring columns are
    populated on submission and never change afterwards.
    """

    __tablename__ = "screening_sessions"
    __table_args__ = (
        UniqueConstraint("parent_id", "session_key", name="uq_screening_sessions_parent_key"),
    )

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    child_id: Mapped[UUID] = mapped_column(
        ForeignKey("children.id", ondelete="CASCADE"), index=True, nullable=False
    )
    parent_id: Mapped[UUID] = mapped_column(index=True, nullable=False)

    # Client-chosen identifier for one-shot submissions, unique per parent
    session_key: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    status: Mapped[str] = mapped_column(String(20), default="in_progress")  # in_progress, submitted

    # [{"question_id": int, "answer": "yes"|"no", "timestamp": int}, ...]
    responses: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)

    # Result (populated on submission)
    total_score: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    critical_failures: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    risk_level: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    follow_up_required: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    completed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    # Relationships
    child: Mapped["Child"] = relationship("Child", back_populates="screening_sessions")

    @property
    def answered_count(self) -> int:
        return len({r["question_id"] for r in self.responses or []})

    def __repr__(self) -> str:
        return f"<ScreeningSession {self.id} ({self.status})>"
