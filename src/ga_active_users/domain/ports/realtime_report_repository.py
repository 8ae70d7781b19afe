"""Realtime report repository port."""

from abc import abstractmethod
from typing import Protocol


class RealtimeReportRepository(Protocol):
    """Port for querying the realtime analytics service."""

    @abstractmethod
    async def get_active_users(self, property_id: str) -> int:
        """Return the current active users count for a property."""
        ...
