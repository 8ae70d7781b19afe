"""Updater for widget display state."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from ga_active_users.adapters.web.state.widget_state import (
    WidgetDisplayState,  # noqa: TC001 - Runtime dependency: used in __init__
)
from ga_active_users.domain.contracts.state_updater import StateUpdaterProtocol

if TYPE_CHECKING:
    from ga_active_users.domain.models import WidgetElement
    from ga_active_users.domain.ports import WidgetHost

logger = logging.getLogger(__name__)


class StateUpdater(StateUpdaterProtocol):
    """Applies poll outcomes to the widget state, element and host."""

    def __init__(
        self,
        display_state: WidgetDisplayState,
        element: WidgetElement,
        host: WidgetHost,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        """Initialize the state updater.

        Args:
            display_state: The WidgetDisplayState instance to update.
            element: The mounted widget element.
            host: Host that re-renders the element.
            clock: Source of update timestamps.
        """
        self.display_state = display_state
        self.element = element
        self.host = host
        self._clock = clock

    def apply_success(self, active_users: int) -> None:
        """Show the new count, flashing when it differs from the previous one.

        Args:
            active_users: The count returned by the report proxy.
        """
        last_value = self.display_state.last_value
        changed = last_value is not None and last_value != active_users

        self.element.show_value(active_users, flash=changed)
        self.display_state.last_value = active_users
        self.display_state.status = "success"
        self.display_state.last_update = self._clock()
        self.display_state.last_error = None
        self.host.refresh(self.element)
        logger.debug(f"Updated active users: {last_value} -> {active_users}")

    def apply_failure(self, error: Exception) -> None:
        """Show the error treatment. The last good value is kept for comparison.

        Args:
            error: The error raised while polling.
        """
        self.element.show_error()
        self.display_state.status = "error"
        self.display_state.last_update = self._clock()
        self.display_state.last_error = str(error)
        self.host.refresh(self.element)
