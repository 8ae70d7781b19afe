"""Widget configuration domain model."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from ga_active_users.domain.errors import WidgetConfigurationError

DEFAULT_RELOAD_TIME_INTERVAL_MS = 30000
DEFAULT_TITLE = "Online Users"


class WidgetPosition(StrEnum):
    """Screen corner the widget is pinned to."""

    BOTTOM_RIGHT = "bottom-right"
    BOTTOM_LEFT = "bottom-left"
    TOP_RIGHT = "top-right"
    TOP_LEFT = "top-left"

    @property
    def vertical_edge(self) -> str:
        return "bottom" if "bottom" in self.value else "top"

    @property
    def horizontal_edge(self) -> str:
        return "right" if "right" in self.value else "left"


@dataclass(frozen=True)
class WidgetConfiguration:
    """Options for one embedded active users widget."""

    api_url: str
    property_id: str
    reload_time_interval: int = DEFAULT_RELOAD_TIME_INTERVAL_MS  # milliseconds
    position: WidgetPosition = WidgetPosition.BOTTOM_RIGHT
    title: str = DEFAULT_TITLE

    def __post_init__(self) -> None:
        if not self.api_url or not self.property_id:
            raise WidgetConfigurationError("`apiUrl` and `propertyId` are required options.")
        if self.reload_time_interval <= 0:
            raise WidgetConfigurationError("`reloadTimeInterval` must be a positive number")

    @property
    def reload_interval_seconds(self) -> float:
        return self.reload_time_interval / 1000

    @classmethod
    def from_options(cls, options: dict[str, Any]) -> "WidgetConfiguration":
        """Build a configuration from camelCase embedding options.

        A missing or zero ``reloadTimeInterval`` falls back to 30 seconds.
        Defaults for ``position`` and ``title`` apply only when the key is
        absent or ``None``. Non-numeric intervals and unknown positions raise
        ``WidgetConfigurationError``.
        """
        position = options.get("position")
        if position is None:
            position = WidgetPosition.BOTTOM_RIGHT
        try:
            position = WidgetPosition(position)
        except ValueError as e:
            raise WidgetConfigurationError(f"Unknown widget position: {position!r}") from e

        interval = options.get("reloadTimeInterval") or DEFAULT_RELOAD_TIME_INTERVAL_MS
        try:
            reload_time_interval = int(interval)
        except (TypeError, ValueError) as e:
            raise WidgetConfigurationError(
                f"`reloadTimeInterval` must be a number of milliseconds, got {interval!r}"
            ) from e

        title = options.get("title")
        return cls(
            api_url=options.get("apiUrl") or "",
            property_id=str(options.get("propertyId") or ""),
            reload_time_interval=reload_time_interval,
            position=position,
            title=DEFAULT_TITLE if title is None else str(title),
        )
