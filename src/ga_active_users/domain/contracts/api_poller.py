"""Protocol for API polling."""

from typing import Protocol


class ApiPollerProtocol(Protocol):
    """Protocol for polling the report proxy and updating widget state."""

    async def start(self) -> None:
        """Start the API poller."""
        ...

    async def stop(self) -> None:
        """Stop the API poller."""
        ...

    async def poll_once(self) -> None:
        """Run a single poll cycle."""
        ...
