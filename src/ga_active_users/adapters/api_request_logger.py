"""Utility for logging outbound analytics requests when GA_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)


def should_log_requests() -> bool:
    """Check if request logging is enabled via GA_LOG_REQUESTS environment variable."""
    return os.getenv("GA_LOG_REQUESTS", "").lower() == "true"


def _format_payload(payload: Any) -> str:
    """Format payload for logging."""
    try:
        return json.dumps(payload, indent=2) if isinstance(payload, dict) else str(payload)
    except (TypeError, ValueError):
        return str(payload)


def log_api_request(method: str, resource: str, payload: Any = None) -> None:
    """Log API request details if GA_LOG_REQUESTS is enabled.

    Args:
        method: API method name (e.g. runRealtimeReport).
        resource: Resource the request targets (e.g. properties/123).
        payload: Request payload/body (optional).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {resource}"]
    if payload is not None:
        log_parts.append(f"Payload: {_format_payload(payload)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
