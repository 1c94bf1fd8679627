import math
from uuid import UUID
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Optional

from carecompanion.models.child import Child
from carecompanion.schemas.child import ChildCreate, ChildUpdate

# Average month length used for age-in-months
DAYS_PER_MONTH = 30.44


def age_in_months(date_of_birth: date, today: Optional[date] = None) -> int:
    today = today or date.today()
    days = (today - date_of_birth).days
    return max(0, math.floor(days / DAYS_PER_MONTH))


class ChildService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all(self, parent_id: UUID) -> list[Child]:
        result = await self.db.execute(
            select(Child)
            .where(Child.parent_id == parent_id)
            .order_by(Child.created_at)
        )
        return list(result.scalars().all())

    async def get_by_id(self, child_id: UUID) -> Optional[Child]:
        return await self.db.get(Child, child_id)

    async def create(self, data: ChildCreate, parent_id: UUID) -> Child:
        child = Child(
            parent_id=parent_id,
            first_name=data.first_name,
            last_name=data.last_name,
            date_of_birth=data.date_of_birth,
            gender=data.gender.value,
            medical_history=data.medical_history,
            current_age_months=age_in_months(data.date_of_birth),
        )
        self.db.add(child)
        await self.db.commit()
        await self.db.refresh(child)
        return child

    async def update(self, child_id: UUID, data: ChildUpdate) -> Optional[Child]:
        child = await self.get_by_id(child_id)
        if not child:
            return None

        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(child, field, value)

        await self.db.commit()
        await self.db.refresh(child)
        return child
