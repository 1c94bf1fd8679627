from pydantic import BaseModel, Field, AliasChoices, field_validator
from datetime import datetime
from uuid import UUID
from typing import Optional
from enum import Enum

from carecompanion.analytics.progress import ProgressCategory


class Severity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class ProgressEntryCreate(BaseModel):
    child_id: UUID = Field(validation_alias=AliasChoices("child_id", "childId"))
    category: ProgressCategory
    milestone: str = Field(min_length=1, max_length=255)
    achieved: bool = False
    notes: Optional[str] = None
    severity: Optional[Severity] = None


class ProgressEntryUpdate(BaseModel):
    achieved: Optional[bool] = None
    notes: Optional[str] = None
    severity: Optional[Severity] = None

    @field_validator("achieved")
    @classmethod
    def achieved_not_null(cls, v: Optional[bool]) -> bool:
        if v is None:
            raise ValueError("achieved cannot be null")
        return v


class ProgressEntryResponse(BaseModel):
    id: UUID
    child_id: UUID
    category: ProgressCategory
    milestone: str
    achieved: bool
    notes: Optional[str]
    severity: Optional[Severity]
    date_recorded: datetime

    class Config:
        from_attributes = True


class CategoryStatsResponse(BaseModel):
    total: int
    achieved: int
    percentage: int = Field(ge=0, le=100)


class ProgressStatsResponse(BaseModel):
    behavioral: CategoryStatsResponse
    communication: CategoryStatsResponse
    social: CategoryStatsResponse
    overall: CategoryStatsResponse
