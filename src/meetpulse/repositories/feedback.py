# src/meetpulse/repositories/feedback.py
"""
Feedback Repository

Feedback is append-only: there is no update or delete path.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List

from ..core.models import Feedback
from .base import BaseRepository


class FeedbackRepository(BaseRepository):
    """Repository for the ``feedback`` collection."""

    table = "feedback"

    def get_for_meetings(self, meeting_ids: Iterable[str]) -> List[Dict[str, Any]]:
        """Get every feedback record whose ``meetingId`` is in ``meeting_ids``."""
        ids = list(meeting_ids)
        if not ids:
            return []
        return self._store.find(self.table, in_filters={"meetingId": ids})

    def submit(self, feedback: Feedback) -> Dict[str, Any]:
        """Append a feedback record stamped with the server time."""
        feedback.created_at = datetime.now(timezone.utc).isoformat()
        return self.create(feedback.to_dict())
