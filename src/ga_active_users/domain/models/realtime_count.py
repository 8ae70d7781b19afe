"""Realtime count domain model."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as UTC ISO-8601 with milliseconds and a 'Z' suffix."""
    utc_moment = moment.astimezone(UTC) if moment.tzinfo else moment.replace(tzinfo=UTC)
    return utc_moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class RealtimeCount:
    """Active users reported for one property at one moment."""

    active_users: int
    property_id: str
    timestamp: datetime

    def __post_init__(self) -> None:
        if self.active_users < 0:
            raise ValueError("active_users must be a non-negative integer")

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body served by the report proxy."""
        return {
            "activeUsers": self.active_users,
            "propertyId": self.property_id,
            "timestamp": format_timestamp(self.timestamp),
        }
