"""Pydantic schemas for registrations and their per-role projections."""

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from castboard.config import get_settings
from castboard.domain.enums import Category, RegistrationStatus, Role, TicketStatus

settings = get_settings()


class RegistrationCreate(BaseModel):
    phone_number: Optional[str] = None
    photos: List[str] = Field(default_factory=list)
    videos: List[str] = Field(default_factory=list)

    @field_validator("photos")
    @classmethod
    def limit_photos(cls, photos: List[str]) -> List[str]:
        if len(photos) > settings.MAX_PHOTOS:
            raise ValueError(f"Maximum {settings.MAX_PHOTOS} photos allowed")
        return photos

    @field_validator("videos")
    @classmethod
    def limit_videos(cls, videos: List[str]) -> List[str]:
        if len(videos) > settings.MAX_VIDEOS:
            raise ValueError(f"Maximum {settings.MAX_VIDEOS} videos allowed")
        return videos

    @field_validator("photos", "videos")
    @classmethod
    def limit_size(cls, refs: List[str]) -> List[str]:
        if any(len(ref) > settings.MAX_MEDIA_REF_LENGTH for ref in refs):
            raise ValueError("File too large")
        return refs


class RegistrationRead(BaseModel):
    id: int
    ticket_id: int
    user_id: int
    phone_number: str
    photos: List[str] = Field(default_factory=list)
    videos: List[str] = Field(default_factory=list)
    status: RegistrationStatus
    created_at: Optional[dt.datetime] = None

    model_config = {"from_attributes": True}


class RosterEntry(BaseModel):
    """One applicant as seen by the ticket owner or an admin."""

    registration_id: int
    user_id: int
    name: str
    last_name: Optional[str] = None
    date_of_birth: Optional[dt.date] = None
    age: Optional[int] = None
    address: Optional[str] = None
    phone_number: str
    email: str
    role: Role
    profile_photo: Optional[str] = None
    photos: List[str] = Field(default_factory=list)
    videos: List[str] = Field(default_factory=list)
    status: RegistrationStatus
    registered_at: Optional[dt.datetime] = None


class RosterTicket(BaseModel):
    id: int
    title: str
    registered_count: int


class RosterResponse(BaseModel):
    ticket: RosterTicket
    registrations: List[RosterEntry]


class TicketSummary(BaseModel):
    id: int
    title: str
    description: str
    category: Category
    location: str
    date: dt.date
    status: TicketStatus
    images: List[str] = Field(default_factory=list)


class MyRegistrationRead(BaseModel):
    """The applicant's own view of one of their registrations."""

    id: int
    ticket: TicketSummary
    phone_number: str
    photos: List[str] = Field(default_factory=list)
    videos: List[str] = Field(default_factory=list)
    status: RegistrationStatus
    registered_at: Optional[dt.datetime] = None
