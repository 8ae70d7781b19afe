"""Starlette web adapter exposing the realtime users report proxy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route

from ga_active_users.adapters.config import AppConfig
from ga_active_users.adapters.web.cors_header_app import CorsHeaderApp
from ga_active_users.domain.errors import ReportProxyError

if TYPE_CHECKING:
    from starlette.requests import Request

    from ga_active_users.domain.contracts.realtime_users_provider import (
        RealtimeUsersProviderProtocol,
    )

logger = logging.getLogger(__name__)


def preflight_headers(config: AppConfig) -> dict[str, str]:
    """Headers answering a CORS preflight: GET only, cached for an hour by default."""
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET",
        "Access-Control-Allow-Headers": "Content-Type",
        "Access-Control-Max-Age": str(config.cors_max_age_seconds),
    }


class ReportProxyWebAdapter:
    """Serves realtime active user counts over HTTP."""

    def __init__(self, service: RealtimeUsersProviderProtocol, config: AppConfig) -> None:
        """Initialize the web adapter.

        Args:
            service: Service validating property ids and querying GA4.
            config: Application configuration.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not callable(getattr(service, "get_realtime_users", None)):
            raise TypeError("service must provide get_realtime_users")

        self.service = service
        self.config = config
        self._server: Any | None = None

    async def realtime_users(self, request: Request) -> Response:
        """Handle GET/OPTIONS on the report endpoint."""
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=preflight_headers(self.config))

        property_id = request.query_params.get("propertyId")
        try:
            realtime_count = await self.service.get_realtime_users(property_id)
        except ReportProxyError as e:
            return PlainTextResponse(e.message, status_code=e.status_code)

        return JSONResponse(
            realtime_count.to_dict(),
            headers={"Cache-Control": self.config.cache_control},
        )

    async def health(self, _request: Request) -> Response:
        return PlainTextResponse("ok")

    def create_app(self) -> CorsHeaderApp:
        """Build the ASGI application."""
        app = Starlette(
            routes=[
                Route("/", self.realtime_users, methods=["GET", "OPTIONS"]),
                Route("/healthz", self.health, methods=["GET"]),
            ]
        )
        logger.info(
            f"Report proxy serving {len(self.service.allowed_property_ids)} allowed "
            f"propert{'y' if len(self.service.allowed_property_ids) == 1 else 'ies'}"
        )
        return CorsHeaderApp(app)

    async def start(self) -> None:
        """Start the web server."""
        import uvicorn

        config = uvicorn.Config(
            self.create_app(),
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(config)
        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
