"""Web adapters: the report proxy server and the polling widget."""

from ga_active_users.adapters.web.report_proxy_app import (
    ReportProxyWebAdapter,
    preflight_headers,
)

__all__ = ["ReportProxyWebAdapter", "preflight_headers"]
