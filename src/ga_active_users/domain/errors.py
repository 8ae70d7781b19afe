"""Error taxonomy shared by the report proxy and the display widget."""

from ga_active_users.domain.models.error_details import ErrorDetails


class ReportProxyError(Exception):
    """Base class for errors the report proxy turns into an HTTP status."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


class MissingParameterError(ReportProxyError):
    """The propertyId query parameter was absent or empty."""

    status_code = 400

    def __init__(self) -> None:
        super().__init__("Missing propertyId parameter.")


class InvalidPropertyError(ReportProxyError):
    """The requested property is not on the configured allow-list."""

    def __init__(self, property_id: str, status_code: int = 500) -> None:
        super().__init__(f"Invalid propertyId: {property_id}.", status_code)
        self.property_id = property_id


class UpstreamFailureError(ReportProxyError):
    """The Google Analytics realtime report call failed."""

    def __init__(self, cause: Exception | str) -> None:
        super().__init__(f"Error fetching GA4 data: {cause}")
        self.cause = cause if isinstance(cause, Exception) else None


class ClientFetchError(Exception):
    """A widget poll failed (bad status, network or payload error)."""

    def __init__(self, message: str, details: ErrorDetails | None = None) -> None:
        super().__init__(message)
        self.details = details or ErrorDetails(reason=message)


class WidgetConfigurationError(ValueError):
    """Required widget options are missing or invalid."""
