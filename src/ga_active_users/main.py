"""Main entry point for the realtime users report proxy."""

import asyncio
import logging
import sys

from ga_active_users.adapters.config import AppConfig
from ga_active_users.adapters.ga4_api import GoogleAnalyticsRealtimeRepository
from ga_active_users.adapters.web import ReportProxyWebAdapter
from ga_active_users.application.services import RealtimeUsersService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def build_service(config: AppConfig) -> RealtimeUsersService:
    """Wire the realtime users service from configuration."""
    repository = GoogleAnalyticsRealtimeRepository(timeout=config.ga_api_timeout or None)
    return RealtimeUsersService(
        repository,
        config.property_allow_list,
        invalid_property_status_code=config.invalid_property_status_code,
    )


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()

    try:
        config.load_toml()
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    if not config.property_allow_list:
        logger.warning(
            "No GA4 property ids configured; every request will be rejected. "
            "Set GA4_PROPERTY_IDS to a comma-separated list of property ids."
        )
    else:
        logger.info(f"Allowed properties: {', '.join(config.property_allow_list)}")

    web_adapter = ReportProxyWebAdapter(build_service(config), config)

    try:
        await web_adapter.start()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        await web_adapter.stop()


if __name__ == "__main__":
    asyncio.run(main())
