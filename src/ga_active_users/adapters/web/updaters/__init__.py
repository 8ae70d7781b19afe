"""Updaters for widget state."""

from ga_active_users.adapters.web.updaters.state_updater import StateUpdater

__all__ = ["StateUpdater"]
