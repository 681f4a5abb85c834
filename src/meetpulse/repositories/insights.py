# src/meetpulse/repositories/insights.py
"""
AI Insight Repository
"""

from datetime import datetime, timezone
from typing import Any, Dict

from .base import BaseRepository


class InsightRepository(BaseRepository):
    """Repository for the ``ai_insights`` collection."""

    table = "ai_insights"

    def save(self, insight: Dict[str, Any]) -> Dict[str, Any]:
        """Persist an insight document as given, adding ``createdAt`` if missing."""
        data = {k: v for k, v in insight.items() if k != "_id"}
        data.setdefault("createdAt", datetime.now(timezone.utc).isoformat())
        return self.create(data)
