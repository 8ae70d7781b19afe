"""Application services (use cases) for realtime active users."""

import logging
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from ga_active_users.domain.errors import (
    InvalidPropertyError,
    MissingParameterError,
    UpstreamFailureError,
)
from ga_active_users.domain.models import RealtimeCount

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ga_active_users.domain.ports import RealtimeReportRepository


def _utc_now() -> datetime:
    return datetime.now(UTC)


class RealtimeUsersService:
    """Validates property ids and fetches realtime active user counts."""

    def __init__(
        self,
        report_repository: "RealtimeReportRepository",
        allowed_property_ids: Iterable[str],
        invalid_property_status_code: int = 500,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the service.

        Args:
            report_repository: Repository that queries the analytics service.
            allowed_property_ids: Property ids this deployment may query.
            invalid_property_status_code: Status reported for unknown property ids.
            clock: Source of response timestamps.
        """
        self._report_repository = report_repository
        self._allowed_property_ids = tuple(allowed_property_ids)
        self._invalid_property_status_code = invalid_property_status_code
        self._clock = clock

    @property
    def allowed_property_ids(self) -> tuple[str, ...]:
        return self._allowed_property_ids

    def validate_property_id(self, property_id: str | None) -> str:
        """Return the property id if it may be queried.

        Raises:
            MissingParameterError: If the id is missing or empty.
            InvalidPropertyError: If the id is not on the allow-list.
        """
        if not property_id:
            raise MissingParameterError()
        if property_id not in self._allowed_property_ids:
            logger.error(
                f"Invalid propertyId. {property_id} not in {list(self._allowed_property_ids)}"
            )
            raise InvalidPropertyError(property_id, self._invalid_property_status_code)
        return property_id

    async def get_realtime_users(self, property_id: str | None) -> RealtimeCount:
        """Get the current active users count for an allow-listed property.

        Makes exactly one upstream call per valid request and none otherwise.

        Raises:
            MissingParameterError: If the id is missing or empty.
            InvalidPropertyError: If the id is not on the allow-list.
            UpstreamFailureError: If the analytics call fails for any reason.
        """
        property_id = self.validate_property_id(property_id)

        try:
            active_users = await self._report_repository.get_active_users(property_id)
        except Exception as e:
            logger.error(f"GA4 API call failed for {property_id}: {e}", exc_info=True)
            raise UpstreamFailureError(e) from e

        return RealtimeCount(
            active_users=active_users,
            property_id=property_id,
            timestamp=self._clock(),
        )
