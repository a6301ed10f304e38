"""
Event service: CRUD for the Event table.

Events are hard-deleted only. Update and delete load the row first so the
caller can respond with the record (updated, or as it was before deletion);
a missing id is reported as None rather than as a database error.
"""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bulletin.models import Event
from bulletin.schemas import EventCreate, EventUpdate

logger = logging.getLogger(__name__)


def _event_to_dict(event: Event) -> dict:
    return {
        "id": event.id,
        "title": event.title,
        "description": event.description,
        "location": event.location,
        "starts_at": event.starts_at.isoformat() if event.starts_at else None,
        "created_at": event.created_at.isoformat() if event.created_at else None,
    }


async def get_events(db: AsyncSession) -> list[dict]:
    result = await db.execute(select(Event).order_by(Event.id))
    return [_event_to_dict(e) for e in result.scalars().all()]


async def get_event(db: AsyncSession, event_id: int) -> dict | None:
    event = await db.get(Event, event_id)
    if event is None:
        return None
    return _event_to_dict(event)


async def create_event(db: AsyncSession, data: EventCreate) -> dict:
    """Insert a new event and return it with its database-assigned id."""
    event = Event(**data.model_dump())
    db.add(event)
    await db.flush()
    await db.refresh(event)
    logger.info("Created event %d", event.id)
    return _event_to_dict(event)


async def update_event(db: AsyncSession, data: EventUpdate) -> dict | None:
    """
    Overwrite every writable field of the event named by ``data.id``.

    Returns the updated record, or None when no such event exists.
    """
    event = await db.get(Event, data.id)
    if event is None:
        return None

    for field, value in data.model_dump(exclude={"id"}).items():
        setattr(event, field, value)

    await db.flush()
    logger.info("Updated event %d", event.id)
    return _event_to_dict(event)


async def delete_event(db: AsyncSession, event_id: int) -> dict | None:
    """Delete the event and return it as it was, or None when absent."""
    event = await db.get(Event, event_id)
    if event is None:
        return None

    data = _event_to_dict(event)
    await db.delete(event)
    await db.flush()
    logger.info("Deleted event %d", event_id)
    return data
