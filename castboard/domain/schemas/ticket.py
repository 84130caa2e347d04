"""Pydantic schemas for casting tickets."""

import datetime as dt
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from castboard.config import get_settings
from castboard.domain.enums import Category, TicketStatus

settings = get_settings()


def _check_images(images: List[str]) -> List[str]:
    if len(images) > settings.MAX_TICKET_IMAGES:
        raise ValueError(f"Maximum {settings.MAX_TICKET_IMAGES} images allowed")
    if any(len(ref) > settings.MAX_MEDIA_REF_LENGTH for ref in images):
        raise ValueError("Image is too large")
    return images


ImageRefs = Annotated[List[str], AfterValidator(_check_images)]


class TicketCreate(BaseModel):
    # Presence and category are checked by the ticket service so that
    # direct callers get the same ValidationError as HTTP callers.
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    date: Optional[dt.date] = None
    images: ImageRefs = Field(default_factory=list)


class TicketUpdate(BaseModel):
    """Allow-list of creator-editable fields. Status, creator and id are rejected."""

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    date: Optional[dt.date] = None
    images: Optional[ImageRefs] = None


class CreatorSummary(BaseModel):
    id: int
    name: str
    email: str


class TicketRead(BaseModel):
    """Public ticket view. Creator PII is limited to name and email."""

    id: int
    title: str
    description: str
    category: Category
    location: str
    date: dt.date
    images: List[str] = Field(default_factory=list)
    status: TicketStatus
    created_by: CreatorSummary
    registered_count: int = 0
    is_registered: bool = False
    # Only populated for the creator or an admin
    registered_user_ids: Optional[List[int]] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
