# src/meetpulse/core/container.py
"""
Dependency Injection Container

Central configuration for the document store and the repositories built on
it. Route handlers ask the container for repositories; the statistics
aggregator never reaches for it and takes the store as an argument instead.

Usage:
    from src.meetpulse.core.container import container

    store = container.store()
    users = container.user_repository()
"""

import logging
from typing import Optional

from .ports import DocumentStoreProtocol

logger = logging.getLogger(__name__)


class Container:
    """
    Dependency injection container.

    The store backend comes from configuration unless one is injected with
    ``configure(store=...)``.
    """

    def __init__(self):
        self._store_instance: Optional[DocumentStoreProtocol] = None
        self._database_type: Optional[str] = None

    @property
    def database_type(self) -> str:
        if self._database_type is None:
            from ..config import get_config
            self._database_type = get_config().database_type
        return self._database_type

    # =============================================================================
    # STORE
    # =============================================================================

    def store(self) -> DocumentStoreProtocol:
        """
        Get the document store instance.

        Returns SupabaseDocumentStore or SQLiteDocumentStore based on config.
        """
        if self._store_instance is None:
            from ..config import get_config
            config = get_config()
            if self.database_type == "supabase":
                from ..adapters.database.supabase import SupabaseDocumentStore
                self._store_instance = SupabaseDocumentStore(
                    url=config.supabase_url or None,
                    key=config.supabase_key or None,
                )
            elif self.database_type == "sqlite":
                from ..adapters.database.sqlite import SQLiteDocumentStore
                self._store_instance = SQLiteDocumentStore(config.sqlite_path)
            else:
                raise ValueError(f"Unknown database type: {self.database_type}")
            logger.info(f"Container initialized store: {self.database_type}")
        return self._store_instance

    # =============================================================================
    # REPOSITORIES
    # =============================================================================

    def user_repository(self):
        """Get the users repository."""
        from ..repositories.users import UserRepository
        return UserRepository(self.store())

    def meeting_repository(self):
        """Get the meetings repository."""
        from ..repositories.meetings import MeetingRepository
        return MeetingRepository(self.store())

    def feedback_repository(self):
        """Get the feedback repository."""
        from ..repositories.feedback import FeedbackRepository
        return FeedbackRepository(self.store())

    def insight_repository(self):
        """Get the AI insights repository."""
        from ..repositories.insights import InsightRepository
        return InsightRepository(self.store())

    # =============================================================================
    # UTILITY
    # =============================================================================

    def reset(self):
        """Reset cached instances (useful for testing)."""
        self._store_instance = None
        self._database_type = None
        logger.info("Container reset")

    def configure(
        self,
        database: Optional[str] = None,
        store: Optional[DocumentStoreProtocol] = None,
    ):
        """
        Reconfigure the container at runtime.

        Args:
            database: "supabase" or "sqlite"
            store: A ready store instance to use as-is
        """
        if database:
            self._database_type = database
            self._store_instance = None
        if store is not None:
            self._store_instance = store
        logger.info(f"Container reconfigured: db={self._database_type or 'injected'}")


# Global container instance
container = Container()


def get_store() -> DocumentStoreProtocol:
    """Get the configured document store."""
    return container.store()
