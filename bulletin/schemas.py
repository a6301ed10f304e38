import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


# --- Article ---

class PostCreate(BaseModel):
    title: str = Field(max_length=255)
    content: str
    is_published: bool


class PostUpdate(BaseModel):
    """
    Partial update payload.

    Omitted fields are left untouched (``model_dump(exclude_unset=True)``).
    Every updatable column is NOT NULL, so a field sent as an explicit
    ``null`` is rejected rather than silently treated as "unset".
    """

    title: str | None = Field(None, max_length=255)
    content: str | None = None
    is_published: bool | None = None
    published_at: datetime | None = None

    @model_validator(mode="after")
    def _reject_explicit_nulls(self):
        nulled = sorted(
            name for name in self.model_fields_set if getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"fields cannot be null: {', '.join(nulled)}")
        return self


class PostResponse(BaseModel):
    id: uuid.UUID
    title: str
    content: str
    published_at: datetime
    is_published: bool
    is_deleted: bool
    deleted_at: datetime | None
    model_config = ConfigDict(from_attributes=True)


# --- Event ---

class EventBase(BaseModel):
    title: str = Field(max_length=255)
    description: str | None = None
    location: str | None = Field(None, max_length=255)
    starts_at: datetime


class EventCreate(EventBase):
    pass


class EventUpdate(EventBase):
    id: int


class EventResponse(EventBase):
    id: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)
