from uuid import UUID
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from carecompanion.database import get_db
from carecompanion.api.deps import get_current_user_id
from carecompanion.schemas.profile import ProfileCreate, ProfileUpdate, ProfileResponse
from carecompanion.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["Profiles"])


@router.get("/me", response_model=Optional[ProfileResponse])
async def get_current_profile(
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
):
    """Get the caller's profile, or null if none has been created."""
    service = ProfileService(db)
    return await service.get_by_user(user_id)


@router.post("", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_profile(
    data: ProfileCreate,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
):
    """Create the caller's profile."""
    service = ProfileService(db)

    existing = await service.get_by_user(user_id)
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Profile already exists",
        )

    return await service.create(data, user_id=user_id)


@router.patch("/me", response_model=ProfileResponse)
async def update_profile(
    data: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
):
    """Update the caller's profile."""
    service = ProfileService(db)
    profile = await service.update(user_id, data)
    if not profile:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile not found",
        )
    return profile
