"""Adapters layer - external system integrations."""

from ga_active_users.adapters.config import AppConfig
from ga_active_users.adapters.ga4_api import GoogleAnalyticsRealtimeRepository

__all__ = [
    "AppConfig",
    "GoogleAnalyticsRealtimeRepository",
]
