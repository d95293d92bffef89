"""Configuration adapters."""

from gauge_finder.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
