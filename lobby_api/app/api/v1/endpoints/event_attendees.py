"""
Event attendance endpoints for API v1.

Responses carrying a single attendee are wrapped as ``{"data": ...}``.
"""

from fastapi import APIRouter, Depends, status

from lobby_api.app.api.deps import PageQuery, get_event_attendee_service, parse_id
from lobby_api.app.schemas.common import MessageResponse, Page
from lobby_api.app.schemas.event_attendee import EventAttendeeCreate, EventAttendeeEnvelope, EventAttendeeRead
from lobby_api.app.services.event_attendee_service import EventAttendeeService

router = APIRouter()


@router.get("/", response_model=Page[EventAttendeeRead])
async def list_event_attendees(
    query: PageQuery = Depends(),
    service: EventAttendeeService = Depends(get_event_attendee_service),
) -> Page[EventAttendeeRead]:
    """All attendance records, newest first."""
    return await service.list_page(page=query.page, limit=query.limit)


@router.get("/events/{event_id}/attendees", response_model=Page[EventAttendeeRead])
async def list_attendees_of_event(
    event_id: str,
    query: PageQuery = Depends(),
    service: EventAttendeeService = Depends(get_event_attendee_service),
) -> Page[EventAttendeeRead]:
    return await service.list_by_event(parse_id(event_id), page=query.page, limit=query.limit)


@router.get("/{attendee_id}", response_model=EventAttendeeEnvelope)
async def get_event_attendee(
    attendee_id: str,
    service: EventAttendeeService = Depends(get_event_attendee_service),
) -> EventAttendeeEnvelope:
    return EventAttendeeEnvelope(data=await service.get(parse_id(attendee_id)))


@router.post("/", response_model=EventAttendeeEnvelope, status_code=status.HTTP_201_CREATED)
async def join_event(
    attendee_in: EventAttendeeCreate,
    service: EventAttendeeService = Depends(get_event_attendee_service),
) -> EventAttendeeEnvelope:
    """Register a user for an event.  ``joinedAt`` defaults to now."""
    return EventAttendeeEnvelope(data=await service.create(attendee_in))


@router.delete("/{attendee_id}", response_model=MessageResponse)
async def leave_event(
    attendee_id: str,
    service: EventAttendeeService = Depends(get_event_attendee_service),
) -> MessageResponse:
    await service.delete(parse_id(attendee_id))
    return MessageResponse(message="Event attendee removed successfully")
