"""Domain models for GA active users."""

from ga_active_users.domain.models.error_details import ErrorDetails
from ga_active_users.domain.models.realtime_count import RealtimeCount, format_timestamp
from ga_active_users.domain.models.widget_configuration import (
    DEFAULT_RELOAD_TIME_INTERVAL_MS,
    DEFAULT_TITLE,
    WidgetConfiguration,
    WidgetPosition,
)
from ga_active_users.domain.models.widget_element import WidgetElement

__all__ = [
    "DEFAULT_RELOAD_TIME_INTERVAL_MS",
    "DEFAULT_TITLE",
    "ErrorDetails",
    "RealtimeCount",
    "WidgetConfiguration",
    "WidgetElement",
    "WidgetPosition",
    "format_timestamp",
]
