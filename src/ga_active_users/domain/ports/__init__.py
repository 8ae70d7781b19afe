"""Ports (interfaces) for the ports-and-adapters architecture."""

from ga_active_users.domain.ports.realtime_report_repository import RealtimeReportRepository
from ga_active_users.domain.ports.widget_host import WidgetHost

__all__ = [
    "RealtimeReportRepository",
    "WidgetHost",
]
