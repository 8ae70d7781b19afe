"""Protocol for providing realtime active user counts."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ga_active_users.domain.models import RealtimeCount


class RealtimeUsersProviderProtocol(Protocol):
    """Protocol for validating property ids and fetching their realtime counts."""

    @property
    def allowed_property_ids(self) -> tuple[str, ...]:
        """Property ids that may be queried."""
        ...

    async def get_realtime_users(self, property_id: str | None) -> "RealtimeCount":
        """Return the realtime count for an allow-listed property.

        Args:
            property_id: The requested property id, possibly missing.
        """
        ...
