from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from uuid import UUID, uuid4
from typing import Optional

from carecompanion.models.base import Base, TimestampMixin, JSONType


DEFAULT_PREFERENCES = {
    "dark_mode": False,
    "notifications": True,
    "language": "en",
}


class Profile(Base, TimestampMixin):
    """Role-bearing profile for an authenticated user (parent, doctor, researcher)."""

    __tablename__ = "profiles"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(unique=True, index=True, nullable=False)

    role: Mapped[str] = mapped_column(String(20), nullable=False)  # parent, doctor, researcher
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    organization: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    license_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    preferences: Mapped[dict] = mapped_column(
        JSONType, nullable=False, default=lambda: dict(DEFAULT_PREFERENCES)
    )

    def __repr__(self) -> str:
        return f"<Profile {self.first_name} {self.last_name} ({self.role})>"
