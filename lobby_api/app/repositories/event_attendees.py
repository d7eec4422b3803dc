"""Repository for event attendance records."""

from typing import Any, Dict, Optional

from .base import BaseRepository, Where


class EventAttendeeRepository(BaseRepository):
    table = "event_attendees"
    columns = ("event_id", "user_profile_id", "joined_at")
    sortable = {"createdAt": "created_at", "joinedAt": "joined_at"}

    def find_attendance(self, event_id: int, user_profile_id: int) -> Optional[Dict[str, Any]]:
        return self.first(
            self.active(Where.eq("event_id", event_id) & Where.eq("user_profile_id", user_profile_id))
        )
