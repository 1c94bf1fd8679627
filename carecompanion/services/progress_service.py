"""
Progress Tracking Service

Caregiver-recorded milestone entries and their aggregate statistics.
"""

import logging
from uuid import UUID
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from carecompanion.models.progress import ProgressEntry
from carecompanion.models.base import utcnow
from carecompanion.schemas.progress import ProgressEntryCreate, ProgressEntryUpdate
from carecompanion.analytics.progress import ProgressCategory, ProgressStats, aggregate_progress

logger = logging.getLogger(__name__)


class ProgressService:
    """Service for milestone tracking."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add_entry(self, data: ProgressEntryCreate, parent_id: UUID) -> ProgressEntry:
        entry = ProgressEntry(
            child_id=data.child_id,
            parent_id=parent_id,
            category=data.category.value,
            milestone=data.milestone,
            achieved=data.achieved,
            notes=data.notes,
            severity=data.severity.value if data.severity else None,
            date_recorded=utcnow(),
        )
        self.db.add(entry)
        await self.db.commit()
        await self.db.refresh(entry)

        logger.info(f"Recorded {entry.category} milestone for child {entry.child_id}")
        return entry

    async def get_entry(self, entry_id: UUID) -> Optional[ProgressEntry]:
        return await self.db.get(ProgressEntry, entry_id)

    async def get_entries(
        self,
        child_id: UUID,
        category: Optional[ProgressCategory] = None,
    ) -> list[ProgressEntry]:
        """Entries for a child, newest first."""
        query = select(ProgressEntry).where(ProgressEntry.child_id == child_id)
        if category:
            query = query.where(ProgressEntry.category == category.value)

        query = query.order_by(ProgressEntry.date_recorded.desc())
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def update_entry(self, entry_id: UUID, data: ProgressEntryUpdate) -> Optional[ProgressEntry]:
        entry = await self.get_entry(entry_id)
        if not entry:
            return None

        update_data = data.model_dump(exclude_unset=True, mode="json")
        for field, value in update_data.items():
            setattr(entry, field, value)

        await self.db.commit()
        await self.db.refresh(entry)
        return entry

    async def get_stats(self, child_id: UUID) -> ProgressStats:
        """Aggregate all of a child's entries. Recomputed on every call."""
        entries = await self.get_entries(child_id)
        return aggregate_progress(entries)
