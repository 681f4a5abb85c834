# src/meetpulse/repositories/meetings.py
"""
Meeting Repository

Meetings carry both ``id`` and ``meetingId``; lookups accept either.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.models import Meeting
from .base import BaseRepository

logger = logging.getLogger(__name__)


class MeetingRepository(BaseRepository):
    """Repository for the ``meetings`` collection."""

    table = "meetings"

    def get_by_id(self, meeting_id: str) -> Optional[Dict[str, Any]]:
        """Get a meeting whose ``id`` or ``meetingId`` equals ``meeting_id``."""
        return (
            self._store.find_one(self.table, {"id": meeting_id})
            or self._store.find_one(self.table, {"meetingId": meeting_id})
        )

    def get_hosted_by(self, identity: str) -> List[Dict[str, Any]]:
        """Get every meeting created by ``identity``."""
        return self._store.find(self.table, {"createdBy": identity})

    def create_meeting(self, meeting: Meeting, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Store a meeting, mirroring ``createdBy`` to ``userId`` and ``id`` to ``meetingId``.

        ``extra`` carries any additional client fields; the typed fields win.
        """
        record = dict(extra or {})
        record.update(meeting.to_dict())
        stored = self.create(record)
        logger.info(f"Created meeting {meeting.id} for {meeting.created_by}")
        return stored
