"""Widget display state dataclass."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

WidgetStatus = Literal["pending", "success", "error"]


@dataclass
class WidgetDisplayState:
    """State for one active users widget."""

    last_value: int | None = None  # None until the first successful poll
    status: WidgetStatus = "pending"
    last_update: datetime | None = None
    last_error: str | None = None
