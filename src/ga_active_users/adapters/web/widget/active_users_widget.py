"""Active users widget: injects an element into a host and keeps it polled.

Usage::

    handle = await initialize(
        {"apiUrl": "https://example.com/realtime", "propertyId": "123"},
        HtmlDocumentHost(),
    )
    ...
    await handle.stop()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ga_active_users.adapters.web.pollers import ApiPoller
from ga_active_users.adapters.web.state import WidgetDisplayState
from ga_active_users.adapters.web.updaters import StateUpdater
from ga_active_users.adapters.web.widget.stylesheet import build_stylesheet
from ga_active_users.domain.errors import WidgetConfigurationError
from ga_active_users.domain.models import WidgetConfiguration, WidgetElement

if TYPE_CHECKING:
    import aiohttp

    from ga_active_users.domain.ports import WidgetHost

logger = logging.getLogger(__name__)


@dataclass
class WidgetHandle:
    """Lifecycle handle for one initialized widget."""

    config: WidgetConfiguration
    element: WidgetElement
    state: WidgetDisplayState
    poller: ApiPoller
    host: WidgetHost

    @property
    def is_running(self) -> bool:
        return self.poller.is_running

    def animation_end(self) -> None:
        """Notify the widget that its flash animation completed."""
        self.element.animation_end()
        self.host.refresh(self.element)

    async def wait_first_poll(self) -> None:
        await self.poller.wait_first_poll()

    async def stop(self) -> None:
        """Stop polling. The element stays mounted with its last content."""
        await self.poller.stop()


def _resolve_config(options: WidgetConfiguration | dict[str, Any]) -> WidgetConfiguration:
    if isinstance(options, WidgetConfiguration):
        return options
    return WidgetConfiguration.from_options(options)


async def initialize(
    options: WidgetConfiguration | dict[str, Any],
    host: WidgetHost,
    session: aiohttp.ClientSession | None = None,
) -> WidgetHandle | None:
    """Mount a widget on the host and start polling the report proxy.

    Missing ``apiUrl``/``propertyId`` is logged and leaves the host untouched;
    ``None`` is returned instead of a handle.
    """
    try:
        config = _resolve_config(options)
    except WidgetConfigurationError as e:
        logger.error(f"GA Active Users Widget: {e}")
        return None

    host.inject_stylesheet(build_stylesheet(config.position))
    element = WidgetElement(title=config.title)
    host.mount(element)

    state = WidgetDisplayState()
    poller = ApiPoller(config, StateUpdater(state, element, host), session=session)
    await poller.start()

    return WidgetHandle(config=config, element=element, state=state, poller=poller, host=host)
