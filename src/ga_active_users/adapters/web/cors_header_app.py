"""ASGI wrapper that stamps the allow-all CORS origin header on every response."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, MutableMapping

ALLOW_ORIGIN_HEADER = b"access-control-allow-origin"


class CorsHeaderApp:
    """ASGI app wrapper that adds Access-Control-Allow-Origin: * to HTTP responses."""

    def __init__(self, app: Callable[..., Awaitable[None]]) -> None:
        """Initialize with the ASGI app to wrap."""
        self.app = app

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[[], Awaitable[dict[str, Any]]],
        send: Callable[[MutableMapping[str, Any]], Awaitable[None]],
    ) -> None:
        """Handle ASGI request and add the origin header."""
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_cors_header(message: MutableMapping[str, Any]) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                if not any(header[0].lower() == ALLOW_ORIGIN_HEADER for header in headers):
                    headers.append((ALLOW_ORIGIN_HEADER, b"*"))
                    message["headers"] = headers
            await send(message)

        await self.app(scope, receive, send_with_cors_header)
