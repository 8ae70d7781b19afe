"""Domain layer - core business logic and models."""

from ga_active_users.domain.models import (
    RealtimeCount,
    WidgetConfiguration,
    WidgetPosition,
)
from ga_active_users.domain.ports import RealtimeReportRepository, WidgetHost

__all__ = [
    "RealtimeCount",
    "RealtimeReportRepository",
    "WidgetConfiguration",
    "WidgetHost",
    "WidgetPosition",
]
