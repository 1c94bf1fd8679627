from pydantic import BaseModel, Field, field_validator
from datetime import date, datetime
from uuid import UUID
from typing import Optional
from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ChildCreate(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    date_of_birth: date
    gender: Gender
    medical_history: Optional[str] = None


class ChildUpdate(BaseModel):
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    medical_history: Optional[str] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def name_not_null(cls, v: Optional[str]) -> str:
        # Omit a name to keep it; null cannot clear it
        if v is None:
            raise ValueError("name cannot be null")
        return v


class ChildResponse(BaseModel):
    id: UUID
    parent_id: UUID
    first_name: str
    last_name: str
    date_of_birth: date
    gender: Gender
    medical_history: Optional[str]
    current_age_months: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
