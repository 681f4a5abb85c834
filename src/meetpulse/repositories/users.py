# src/meetpulse/repositories/users.py
"""
User Repository

Profiles keyed by email. Saving is an upsert on email; computed statistics
are stripped so the store never holds a stale copy of them.
"""

import logging
from typing import Any, Dict, Optional

from ..core.models import User
from .base import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    """Repository for the ``users`` collection."""

    table = "users"

    def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Get a user profile by email."""
        return self._store.find_one(self.table, {"email": email})

    def save_profile(self, profile: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert or update a profile by email.

        Args:
            profile: Profile fields; must contain ``email``

        Returns:
            The stored profile
        """
        data = User.from_dict(profile).to_dict()
        self._store.upsert(self.table, data, ["email"])
        logger.info(f"Saved profile for {data['email']}")
        return self.get_by_email(data["email"]) or data
