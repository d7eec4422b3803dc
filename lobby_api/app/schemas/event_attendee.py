"""
Pydantic models for event attendance.

An attendee row links a user profile to an event.  Leaving an event
soft deletes the row, so a user may join the same event again later.
"""

from datetime import datetime
from typing import Optional

from .common import CamelModel, IdStr, PositiveId


class EventAttendeeCreate(CamelModel):
    event_id: PositiveId
    user_profile_id: PositiveId
    # Defaults to the time of the request when omitted.
    joined_at: Optional[datetime] = None


class EventAttendeeRead(CamelModel):
    id: IdStr
    event_id: IdStr
    user_profile_id: IdStr
    joined_at: str
    created_at: str
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None


class EventAttendeeEnvelope(CamelModel):
    data: EventAttendeeRead
