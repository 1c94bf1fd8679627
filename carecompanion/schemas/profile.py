from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from uuid import UUID
from typing import Optional
from enum import Enum


class ProfileRole(str, Enum):
    PARENT = "parent"
    DOCTOR = "doctor"
    RESEARCHER = "researcher"


class Preferences(BaseModel):
    dark_mode: bool = False
    notifications: bool = True
    language: str = "en"


class ProfileCreate(BaseModel):
    role: ProfileRole
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    organization: Optional[str] = None
    license_number: Optional[str] = None


class ProfileUpdate(BaseModel):
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    organization: Optional[str] = None
    preferences: Optional[Preferences] = None

    @field_validator("first_name", "last_name", "preferences")
    @classmethod
    def required_not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v


class ProfileResponse(BaseModel):
    id: UUID
    user_id: UUID
    role: ProfileRole
    first_name: str
    last_name: str
    organization: Optional[str]
    license_number: Optional[str]
    preferences: Preferences
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
