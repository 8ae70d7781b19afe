"""Application services (use cases)."""

from ga_active_users.application.services import RealtimeUsersService

__all__ = ["RealtimeUsersService"]
