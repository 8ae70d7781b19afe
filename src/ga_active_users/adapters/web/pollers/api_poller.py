"""API poller that keeps a widget in sync with the report proxy."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from ga_active_users.domain.contracts.api_poller import ApiPollerProtocol
from ga_active_users.domain.contracts.state_updater import (
    StateUpdaterProtocol,  # noqa: TC001 - Runtime dependency: used in __init__ signature
)
from ga_active_users.domain.errors import ClientFetchError
from ga_active_users.domain.models import ErrorDetails

if TYPE_CHECKING:
    from ga_active_users.domain.models import WidgetConfiguration

logger = logging.getLogger(__name__)


def _reason_for_status(status_code: int) -> str:
    if status_code == 429:
        return "Rate limit exceeded"
    if status_code == 500:
        return "Internal server error"
    if status_code == 502:
        return "Bad gateway (server error)"
    if status_code == 503:
        return "Service unavailable"
    if status_code == 504:
        return "Gateway timeout"
    return f"HTTP {status_code}"


def parse_active_users(data: Any) -> int:
    """Extract activeUsers from a report proxy JSON body.

    Raises:
        ClientFetchError: If the body does not carry a non-negative integer count.
    """
    value = data.get("activeUsers") if isinstance(data, dict) else None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ClientFetchError(
            f"Unexpected activeUsers in response: {value!r}",
            ErrorDetails(reason="Invalid response payload"),
        )
    return value


class ApiPoller(ApiPollerProtocol):
    """Polls the report proxy on a fixed interval and updates widget state."""

    def __init__(
        self,
        config: WidgetConfiguration,
        state_updater: StateUpdaterProtocol,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize the API poller.

        Args:
            config: Widget configuration (endpoint, property, interval).
            state_updater: Updater applying poll outcomes.
            session: Optional aiohttp session. One is created and owned otherwise.
        """
        self.config = config
        self.state_updater = state_updater
        self.session = session
        self._owns_session = session is None
        self._task: asyncio.Task | None = None
        self.first_poll_done = asyncio.Event()

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the API poller."""
        if self.is_running:
            logger.warning("API poller already running")
            return

        if self.session is None:
            self.session = aiohttp.ClientSession()
            self._owns_session = True

        self._task = asyncio.create_task(self._poll_loop())
        logger.info(
            f"Started API poller for property {self.config.property_id} "
            f"every {self.config.reload_interval_seconds:g}s"
        )

    async def stop(self) -> None:
        """Stop the API poller."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("API poller cancelled")
            logger.info("Stopped API poller")
        self._task = None

        if self._owns_session and self.session is not None:
            await self.session.close()
            self.session = None

    async def wait_first_poll(self) -> None:
        """Wait until the first poll has finished or the poll loop has ended."""
        if self._task is None:
            return
        waiter = asyncio.ensure_future(self.first_poll_done.wait())
        try:
            await asyncio.wait({waiter, self._task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            waiter.cancel()

    async def _poll_loop(self) -> None:
        """Main polling loop."""
        try:
            # Do initial update immediately
            await self._guarded_poll()

            while True:
                await asyncio.sleep(self.config.reload_interval_seconds)
                await self._guarded_poll()
        except asyncio.CancelledError:
            logger.info("API poller cancelled")
            raise

    async def _guarded_poll(self) -> None:
        """Run one poll; an error while updating or rendering never ends the loop."""
        try:
            await self.poll_once()
        except Exception as e:
            logger.error(f"GA Active Users Widget: Error in poll cycle: {e}", exc_info=True)
        finally:
            self.first_poll_done.set()

    async def _fetch_active_users(self) -> int:
        """GET the report proxy and return the reported count."""
        if self.session is None:
            raise ClientFetchError("API poller has no HTTP session")

        async with self.session.get(
            self.config.api_url, params={"propertyId": self.config.property_id}
        ) as response:
            if not 200 <= response.status < 300:
                raise ClientFetchError(
                    f"Network response was not ok ({response.status})",
                    ErrorDetails(
                        status_code=response.status,
                        reason=_reason_for_status(response.status),
                    ),
                )
            data = await response.json(content_type=None)
        return parse_active_users(data)

    async def poll_once(self) -> None:
        """Run one poll. Failures become error state, never exceptions."""
        try:
            active_users = await self._fetch_active_users()
        except ClientFetchError as e:
            logger.error(
                f"GA Active Users Widget: Error fetching data: {e.details.reason} "
                f"(status: {e.details.status_code}, error: {e})"
            )
            self.state_updater.apply_failure(e)
            return
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"GA Active Users Widget: Error fetching data: {e}")
            self.state_updater.apply_failure(e)
            return

        self.state_updater.apply_success(active_users)
