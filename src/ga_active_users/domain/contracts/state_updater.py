"""Protocol for updating widget display state."""

from typing import Protocol


class StateUpdaterProtocol(Protocol):
    """Protocol for applying poll outcomes to a widget."""

    def apply_success(self, active_users: int) -> None:
        """Apply a successful poll result.

        Args:
            active_users: The count returned by the report proxy.
        """
        ...

    def apply_failure(self, error: Exception) -> None:
        """Apply a failed poll.

        Args:
            error: The error raised while polling.
        """
        ...
