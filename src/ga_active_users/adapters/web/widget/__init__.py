"""Embeddable active users widget."""

from ga_active_users.adapters.web.widget.active_users_widget import WidgetHandle, initialize
from ga_active_users.adapters.web.widget.stylesheet import (
    FLASH_DURATION_SECONDS,
    build_stylesheet,
)

__all__ = ["FLASH_DURATION_SECONDS", "WidgetHandle", "build_stylesheet", "initialize"]
