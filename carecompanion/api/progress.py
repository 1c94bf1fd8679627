"""
Progress API Endpoints

Milestone entries and aggregate achievement statistics.
"""

from uuid import UUID
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from carecompanion.database import get_db
from carecompanion.models.child import Child
from carecompanion.api.deps import get_current_user_id, get_child_for_user, get_owned_child
from carecompanion.analytics.progress import ProgressCategory
from carecompanion.schemas.progress import (
    ProgressEntryCreate,
    ProgressEntryUpdate,
    ProgressEntryResponse,
    ProgressStatsResponse,
)
from carecompanion.services.progress_service import ProgressService

router = APIRouter(prefix="/progress", tags=["Progress"])


@router.post("/entries", response_model=ProgressEntryResponse, status_code=status.HTTP_201_CREATED)
async def add_entry(
    data: ProgressEntryCreate,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
):
    """Record a milestone observation for a child."""
    await get_child_for_user(db, data.child_id, user_id)

    service = ProgressService(db)
    return await service.add_entry(data, parent_id=user_id)


@router.patch("/entries/{entry_id}", response_model=ProgressEntryResponse)
async def update_entry(
    entry_id: UUID,
    data: ProgressEntryUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
):
    """Toggle achievement or change notes/severity on an entry."""
    service = ProgressService(db)
    entry = await service.get_entry(entry_id)
    if not entry:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Progress entry not found",
        )
    if entry.parent_id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to access this progress entry",
        )

    return await service.update_entry(entry_id, data)


@router.get("/children/{child_id}/entries", response_model=list[ProgressEntryResponse])
async def list_entries(
    category: Optional[ProgressCategory] = Query(None, description="Filter by category"),
    child: Child = Depends(get_owned_child),
    db: AsyncSession = Depends(get_db),
):
    """List a child's entries, newest first."""
    service = ProgressService(db)
    return await service.get_entries(child.id, category=category)


@router.get("/children/{child_id}/stats", response_model=ProgressStatsResponse)
async def get_stats(
    child: Child = Depends(get_owned_child),
    db: AsyncSession = Depends(get_db),
):
    """Achievement counts and percentages per category and overall."""
    service = ProgressService(db)
    stats = await service.get_stats(child.id)
    return stats.to_dict()
