"""Configuration adapters."""

from ga_active_users.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
