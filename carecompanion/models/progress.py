from sqlalchemy import String, Text, Boolean, ForeignKey, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from uuid import UUID, uuid4
from datetime import datetime
from typing import Optional, TYPE_CHECKING

from carecompanion.models.base import Base, TimestampMixin, utcnow

if TYPE_CHECKING:
    from carecompanion.models.child import Child


class ProgressEntry(Base, TimestampMixin):
    """A single milestone observation recorded by a caregiver."""

    __tablename__ = "progress_entries"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    child_id: Mapped[UUID] = mapped_column(
        ForeignKey("children.id", ondelete="CASCADE"), index=True, nullable=False
    )
    parent_id: Mapped[UUID] = mapped_column(index=True, nullable=False)

    category: Mapped[str] = mapped_column(String(20), index=True, nullable=False)  # behavioral, communication, social
    milestone: Mapped[str] = mapped_column(String(255), nullable=False)
    achieved: Mapped[bool] = mapped_column(Boolean, default=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    severity: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)  # mild, moderate, severe

    date_recorded: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    # Relationships
    child: Mapped["Child"] = relationship("Child", back_populates="progress_entries")

    def __repr__(self) -> str:
        return f"<ProgressEntry {self.category}: {self.milestone}>"
