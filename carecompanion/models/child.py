from sqlalchemy import String, Date, Text, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from uuid import UUID, uuid4
from datetime import date
from typing import Optional, TYPE_CHECKING

from carecompanion.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from carecompanion.models.screening import ScreeningSession
    from carecompanion.models.progress import ProgressEntry


class Child(Base, TimestampMixin):
    __tablename__ = "children"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    parent_id: Mapped[UUID] = mapped_column(index=True, nullable=False)

    # Demographics
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    gender: Mapped[str] = mapped_column(String(20), nullable=False)  # male, female, other

    # Clinical
    medical_history: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    current_age_months: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    screening_sessions: Mapped[list["ScreeningSession"]] = relationship(
        "ScreeningSession", back_populates="child", cascade="all, delete-orphan"
    )
    progress_entries: Mapped[list["ProgressEntry"]] = relationship(
        "ProgressEntry", back_populates="child", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Child {self.first_name} {self.last_name}>"
