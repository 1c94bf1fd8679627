from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from carecompanion.database import get_db
from carecompanion.models.child import Child
from carecompanion.api.deps import get_current_user_id, get_owned_child
from carecompanion.schemas.child import ChildCreate, ChildUpdate, ChildResponse
from carecompanion.services.child_service import ChildService

router = APIRouter(prefix="/children", tags=["Children"])


@router.get("", response_model=list[ChildResponse])
async def list_children(
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
):
    """List the caller's children."""
    service = ChildService(db)
    return await service.get_all(parent_id=user_id)


@router.post("", response_model=ChildResponse, status_code=status.HTTP_201_CREATED)
async def add_child(
    data: ChildCreate,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
):
    """Add a child. Age in months is derived from the date of birth."""
    service = ChildService(db)
    return await service.create(data, parent_id=user_id)


@router.get("/{child_id}", response_model=ChildResponse)
async def get_child(child: Child = Depends(get_owned_child)):
    """Get a child by ID."""
    return child


@router.patch("/{child_id}", response_model=ChildResponse)
async def update_child(
    data: ChildUpdate,
    child: Child = Depends(get_owned_child),
    db: AsyncSession = Depends(get_db),
):
    """Update a child's names or medical history."""
    service = ChildService(db)
    return await service.update(child.id, data)
