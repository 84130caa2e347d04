"""Pydantic schemas for User and Auth."""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from castboard.domain.enums import Role


class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    last_name: Optional[str] = Field(default=None, max_length=200)
    email: EmailStr
    password: str = Field(min_length=6)
    role: Role = Role.USER


class UserRead(BaseModel):
    id: int
    name: str
    last_name: Optional[str] = None
    email: str
    role: Role
    date_of_birth: Optional[dt.date] = None
    age: Optional[int] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    profile_photo: Optional[str] = None
    created_at: Optional[dt.datetime] = None

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead
