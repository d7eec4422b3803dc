"""
Business logic for event attendance.

Events live in another service, so ``event_id`` is stored as given.
The user profile must exist locally.  A user attends an event at most
once at a time: a live attendance row blocks a second join, while a
soft deleted one (the user left) does not.
"""

import logging
from typing import Optional

from ..core.db import utc_now
from ..core.errors import AlreadyDeletedError, ConflictError, NotFoundError
from ..schemas.common import Page, build_pagination
from ..schemas.event_attendee import EventAttendeeCreate, EventAttendeeRead
from ..repositories.base import Where

logger = logging.getLogger(__name__)


class EventAttendeeService:
    def __init__(self, attendees, profiles) -> None:
        self.attendees = attendees
        self.profiles = profiles

    def _page(self, page: int, limit: int, sort_column: str, where: Optional[Where] = None) -> Page:
        rows, total = self.attendees.search(
            None,
            sort_column=sort_column,
            sort_order="desc",
            limit=limit,
            offset=(page - 1) * limit,
            where=where,
        )
        return Page[EventAttendeeRead](
            data=[EventAttendeeRead.model_validate(row) for row in rows],
            pagination=build_pagination(page, limit, total),
        )

    async def list_page(self, page: int = 1, limit: int = 10) -> Page:
        """All live attendance rows, newest first."""
        return self._page(page, limit, "created_at")

    async def list_by_event(self, event_id: int, page: int = 1, limit: int = 10) -> Page:
        """Attendees of one event ordered by join time, latest first."""
        return self._page(page, limit, "joined_at", Where.eq("event_id", event_id))

    async def get(self, attendee_id: int) -> EventAttendeeRead:
        row = self.attendees.get(attendee_id)
        if not row:
            raise NotFoundError("Event attendee not found")
        return EventAttendeeRead.model_validate(row)

    async def create(self, data: EventAttendeeCreate) -> EventAttendeeRead:
        values = data.model_dump(mode="json")
        values["joined_at"] = values.get("joined_at") or utc_now()
        with self.attendees.transaction():
            if not self.profiles.get(data.user_profile_id):
                raise NotFoundError("User not found")
            if self.attendees.find_attendance(data.event_id, data.user_profile_id):
                raise ConflictError("User is already attending")
            row = self.attendees.insert(values)
        logger.info("User %s joined event %s", data.user_profile_id, data.event_id)
        return EventAttendeeRead.model_validate(row)

    async def delete(self, attendee_id: int) -> None:
        with self.attendees.transaction():
            current = self.attendees.get(attendee_id, include_deleted=True)
            if not current:
                raise NotFoundError("Event attendee not found")
            if current["deleted_at"]:
                raise AlreadyDeletedError("Event attendee already removed")
            self.attendees.soft_delete_by_id(attendee_id)
        logger.info("Removed event attendee %s", attendee_id)
