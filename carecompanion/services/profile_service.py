from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Optional

from carecompanion.models.profile import Profile, DEFAULT_PREFERENCES
from carecompanion.schemas.profile import ProfileCreate, ProfileUpdate


class ProfileService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_user(self, user_id: UUID) -> Optional[Profile]:
        result = await self.db.execute(select(Profile).where(Profile.user_id == user_id))
        return result.scalar_one_or_none()

    async def create(self, data: ProfileCreate, user_id: UUID) -> Profile:
        profile = Profile(
            user_id=user_id,
            role=data.role.value,
            first_name=data.first_name,
            last_name=data.last_name,
            organization=data.organization,
            license_number=data.license_number,
            preferences=dict(DEFAULT_PREFERENCES),
        )
        self.db.add(profile)
        await self.db.commit()
        await self.db.refresh(profile)
        return profile

    async def update(self, user_id: UUID, data: ProfileUpdate) -> Optional[Profile]:
        profile = await self.get_by_user(user_id)
        if not profile:
            return None

        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(profile, field, value)

        await self.db.commit()
        await self.db.refresh(profile)
        return profile
