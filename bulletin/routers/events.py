from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from bulletin.database import get_db
from bulletin.schemas import EventCreate, EventResponse, EventUpdate
from bulletin.services import event_service

router = APIRouter(prefix="/api", tags=["events"])

@router.get("/events", response_model=list[EventResponse])
async def get_events(db: AsyncSession = Depends(get_db)):
    return await event_service.get_events(db)

@router.get("/event/{event_id}", response_model=EventResponse)
async def get_event(event_id: int, db: AsyncSession = Depends(get_db)):
    event = await event_service.get_event(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event

@router.post("/event", response_model=EventResponse)
async def create_event(data: EventCreate, db: AsyncSession = Depends(get_db)):
    return await event_service.create_event(db, data)

# A missing id answers 404 on update/delete; database failures still surface as 500.
@router.put("/event", response_model=EventResponse)
async def update_event(data: EventUpdate, db: AsyncSession = Depends(get_db)):
    event = await event_service.update_event(db, data)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event

@router.delete("/event/{event_id}", response_model=EventResponse)
async def delete_event(event_id: int, db: AsyncSession = Depends(get_db)):
    event = await event_service.delete_event(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event
