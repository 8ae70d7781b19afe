"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_property_ids(raw: str | list[str] | tuple[str, ...] | None) -> tuple[str, ...]:
    """Parse a comma-separated allow-list into an ordered tuple of unique ids."""
    if raw is None:
        return ()
    items = raw.split(",") if isinstance(raw, str) else [str(item) for item in raw]
    result: list[str] = []
    for item in items:
        property_id = item.strip()
        if property_id and property_id not in result:
            result.append(property_id)
    return tuple(result)


WIDGET_POSITIONS = ("bottom-right", "bottom-left", "top-right", "top-left")


def _check_status_code(v: int) -> int:
    if v not in (400, 500):
        raise ValueError("invalid_property_status_code must be either 400 or 500")
    return v


def _check_non_negative(v: int) -> int:
    if v < 0:
        raise ValueError("durations must not be negative")
    return v


def _check_position(v: str) -> str:
    if v.lower() not in WIDGET_POSITIONS:
        raise ValueError(
            "widget_position must be one of 'bottom-right', 'bottom-left', "
            "'top-right' or 'top-left'"
        )
    return v.lower()


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8080, description="Port to bind the server to")
    reload: bool = Field(default=False, description="Enable auto-reload for development")

    # Report proxy configuration
    ga4_property_ids: str = Field(
        default="",
        description="Comma-separated list of GA4 property ids the proxy may query",
    )
    ga_api_timeout: int = Field(
        default=0,
        description="Timeout for GA4 Data API requests in seconds (0 leaves the client default)",
    )
    cache_max_age_seconds: int = Field(
        default=15, description="Client cache lifetime (Cache-Control max-age)"
    )
    cache_shared_max_age_seconds: int = Field(
        default=30, description="Shared/CDN cache lifetime (Cache-Control s-maxage)"
    )
    cors_max_age_seconds: int = Field(
        default=3600, description="Preflight cache lifetime (Access-Control-Max-Age)"
    )
    invalid_property_status_code: int = Field(
        default=500,
        description="HTTP status for property ids outside the allow-list (500 or 400)",
    )

    # Widget defaults (used by the CLI hosts)
    widget_reload_time_interval: int = Field(
        default=30000, description="Widget refresh interval in milliseconds"
    )
    widget_position: str = Field(default="bottom-right", description="Widget screen corner")
    widget_title: str = Field(default="Online Users", description="Widget title")

    # Optional TOML config file with [proxy] and [widget] sections
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding proxy and widget settings",
    )

    @field_validator("invalid_property_status_code")
    @classmethod
    def validate_invalid_property_status_code(cls, v: int) -> int:
        """Validate the invalid property status is either 400 or 500."""
        return _check_status_code(v)

    @field_validator(
        "ga_api_timeout",
        "cache_max_age_seconds",
        "cache_shared_max_age_seconds",
        "cors_max_age_seconds",
    )
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        """Validate durations are not negative."""
        return _check_non_negative(v)

    @field_validator("widget_position")
    @classmethod
    def validate_widget_position(cls, v: str) -> str:
        """Validate the widget position names one of the four corners."""
        return _check_position(v)

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Create a config that ignores any local .env file."""
        return cls(_env_file=None, **overrides)  # type: ignore[call-arg]

    @property
    def property_allow_list(self) -> tuple[str, ...]:
        """The ordered, de-duplicated property allow-list."""
        return parse_property_ids(self.ga4_property_ids)

    @property
    def cache_control(self) -> str:
        return f"max-age={self.cache_max_age_seconds}, s-maxage={self.cache_shared_max_age_seconds}"

    def widget_options(self) -> dict[str, Any]:
        """Widget defaults as camelCase embedding options."""
        return {
            "reloadTimeInterval": self.widget_reload_time_interval,
            "position": self.widget_position,
            "title": self.widget_title,
        }

    def load_toml(self) -> dict[str, Any]:
        """Load the TOML file and apply its settings.

        ``[proxy] property_ids`` replaces the allow-list; other ``[proxy]`` and
        ``[widget]`` keys override the matching fields.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        proxy = toml_data.get("proxy", {})
        if "property_ids" in proxy:
            property_ids = proxy["property_ids"]
            if not isinstance(property_ids, list | str):
                raise ValueError("TOML config 'proxy.property_ids' must be a list or string")
            self.ga4_property_ids = ",".join(parse_property_ids(property_ids))
        for key in (
            "cache_max_age_seconds",
            "cache_shared_max_age_seconds",
            "cors_max_age_seconds",
            "ga_api_timeout",
        ):
            if key in proxy:
                setattr(self, key, _check_non_negative(int(proxy[key])))
        if "invalid_property_status_code" in proxy:
            self.invalid_property_status_code = _check_status_code(
                int(proxy["invalid_property_status_code"])
            )

        widget = toml_data.get("widget", {})
        if "reload_time_interval" in widget:
            self.widget_reload_time_interval = int(widget["reload_time_interval"])
        if "position" in widget:
            self.widget_position = _check_position(widget["position"])
        if "title" in widget:
            self.widget_title = widget["title"]

        return toml_data
