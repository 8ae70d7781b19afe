"""Terminal host that prints the widget whenever it changes."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TYPE_CHECKING, TextIO

from ga_active_users.adapters.web.widget.stylesheet import FLASH_DURATION_SECONDS
from ga_active_users.domain.ports import WidgetHost

if TYPE_CHECKING:
    from ga_active_users.domain.models import WidgetElement, WidgetPosition

logger = logging.getLogger(__name__)


class ConsoleWidgetHost(WidgetHost):
    """Prints one line per widget state change.

    A changed count is marked with ``*`` until the flash animation would have
    finished, after which the element's animation end is signalled.
    """

    def __init__(
        self,
        position: WidgetPosition | None = None,
        stream: TextIO | None = None,
        flash_duration: float = FLASH_DURATION_SECONDS,
    ) -> None:
        self.position = position
        self.stream = stream or sys.stdout
        self.flash_duration = flash_duration
        self._pending_animation: asyncio.TimerHandle | None = None

    def inject_stylesheet(self, css: str) -> None:
        logger.debug(f"Console host ignores stylesheet ({len(css)} chars)")

    def mount(self, element: WidgetElement) -> None:
        self._write(element)

    def refresh(self, element: WidgetElement) -> None:
        self._write(element)
        if element.is_updated and self._pending_animation is None:
            loop = asyncio.get_running_loop()
            self._pending_animation = loop.call_later(
                self.flash_duration, self._end_animation, element
            )

    def _end_animation(self, element: WidgetElement) -> None:
        self._pending_animation = None
        element.animation_end()

    def format_line(self, element: WidgetElement) -> str:
        corner = f"[{self.position}] " if self.position else ""
        marker = " *" if element.is_updated else ""
        suffix = " (!)" if element.is_error else ""
        return f"{corner}{element.title}: {element.value_text}{marker}{suffix}"

    def _write(self, element: WidgetElement) -> None:
        print(self.format_line(element), file=self.stream, flush=True)
