"""Pollers for the widget."""

from ga_active_users.adapters.web.pollers.api_poller import ApiPoller, parse_active_users

__all__ = ["ApiPoller", "parse_active_users"]
