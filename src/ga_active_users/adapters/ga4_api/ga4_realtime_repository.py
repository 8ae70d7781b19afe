"""Realtime report repository backed by the GA4 Data API."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from google.analytics.data_v1beta import BetaAnalyticsDataAsyncClient
from google.analytics.data_v1beta.types import Metric, RunRealtimeReportRequest

from ga_active_users.adapters.api_request_logger import log_api_request
from ga_active_users.domain.ports import RealtimeReportRepository

if TYPE_CHECKING:
    from google.analytics.data_v1beta.types import RunRealtimeReportResponse

logger = logging.getLogger(__name__)

ACTIVE_USERS_METRIC = "activeUsers"

_INTEGER_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def parse_metric_value(value: str | None) -> int:
    """Parse a metric value the way a lenient base-10 integer parse would.

    Leading whitespace and trailing garbage are ignored ("37", " 37", "37.0"
    all give 37). A missing value counts as 0.

    Raises:
        ValueError: If the value has no integer prefix or is negative.
    """
    if value is None or value == "":
        return 0
    match = _INTEGER_PREFIX.match(value)
    if not match:
        raise ValueError(f"Metric value is not an integer: {value!r}")
    count = int(match.group(1))
    if count < 0:
        raise ValueError(f"Metric value is negative: {value!r}")
    return count


def build_realtime_request(property_id: str) -> RunRealtimeReportRequest:
    """Build the realtime report request: active users, no dimensions."""
    return RunRealtimeReportRequest(
        property=f"properties/{property_id}",
        metrics=[Metric(name=ACTIVE_USERS_METRIC)],
    )


def extract_active_users(response: RunRealtimeReportResponse | Any) -> int:
    """Return the first row's first metric value, or 0 when there are no rows."""
    rows = list(getattr(response, "rows", None) or [])
    if not rows:
        return 0
    metric_values = list(getattr(rows[0], "metric_values", None) or [])
    if not metric_values:
        return 0
    return parse_metric_value(metric_values[0].value)


class GoogleAnalyticsRealtimeRepository(RealtimeReportRepository):
    """Queries GA4 realtime reports using Application Default Credentials."""

    def __init__(
        self,
        client: BetaAnalyticsDataAsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            client: Optional pre-built Data API client. Created lazily otherwise.
            timeout: Optional per-request timeout in seconds.
        """
        self._client = client
        self._timeout = timeout

    def _get_client(self) -> BetaAnalyticsDataAsyncClient:
        if self._client is None:
            self._client = BetaAnalyticsDataAsyncClient()
            logger.info("Created GA4 Data API client with ambient credentials")
        return self._client

    async def get_active_users(self, property_id: str) -> int:
        """Run one realtime report for the property and return active users."""
        request = build_realtime_request(property_id)
        log_api_request(
            "runRealtimeReport",
            request.property,
            payload={"metrics": [ACTIVE_USERS_METRIC]},
        )

        client = self._get_client()
        if self._timeout:
            response = await client.run_realtime_report(request=request, timeout=self._timeout)
        else:
            response = await client.run_realtime_report(request=request)

        active_users = extract_active_users(response)
        logger.debug(f"GA4 realtime report for {property_id}: {active_users} active users")
        return active_users
