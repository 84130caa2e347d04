"""Pydantic schemas for user administration."""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from castboard.config import get_settings
from castboard.domain.enums import Role

settings = get_settings()


class ProfileUpdate(BaseModel):
    """Self-service profile fields; email, role and password are not editable here."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    last_name: Optional[str] = Field(default=None, max_length=200)
    date_of_birth: Optional[dt.date] = None
    age: Optional[int] = Field(default=None, ge=0, le=150)
    address: Optional[str] = Field(default=None, max_length=500)
    phone_number: Optional[str] = Field(default=None, max_length=30)
    profile_photo: Optional[str] = None

    @field_validator("profile_photo")
    @classmethod
    def limit_size(cls, ref: Optional[str]) -> Optional[str]:
        if ref is not None and len(ref) > settings.MAX_MEDIA_REF_LENGTH:
            raise ValueError("File too large")
        return ref


class RoleUpdate(BaseModel):
    role: Role


class RoleChangeRead(BaseModel):
    id: int
    user_id: int
    changed_by_id: int
    old_role: Role
    new_role: Role
    changed_at: Optional[dt.datetime] = None

    model_config = {"from_attributes": True}
