from uuid import UUID
from typing import Optional
from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from carecompanion.database import get_db
from carecompanion.models.child import Child
from carecompanion.services.child_service import ChildService


async def get_current_user_id(
    x_user_id: Optional[str] = Header(None, alias="x-user-id"),
) -> UUID:
    """
    Identity of the caller, as asserted by the upstream auth layer.
    Authentication itself happens before requests reach this service.
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    try:
        return UUID(x_user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )


async def get_child_for_user(db: AsyncSession, child_id: UUID, user_id: UUID) -> Child:
    """Load a child and check that it belongs to the caller."""
    child = await ChildService(db).get_by_id(child_id)
    if not child:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Child not found",
        )
    if child.parent_id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to access this child",
        )
    return child


async def get_owned_child(
    child_id: UUID,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> Child:
    """Dependency form of get_child_for_user for routes with a child_id path parameter."""
    return await get_child_for_user(db, child_id, user_id)
