"""Google Analytics 4 Data API adapters."""

from ga_active_users.adapters.ga4_api.ga4_realtime_repository import (
    ACTIVE_USERS_METRIC,
    GoogleAnalyticsRealtimeRepository,
    build_realtime_request,
    extract_active_users,
    parse_metric_value,
)

__all__ = [
    "ACTIVE_USERS_METRIC",
    "GoogleAnalyticsRealtimeRepository",
    "build_realtime_request",
    "extract_active_users",
    "parse_metric_value",
]
