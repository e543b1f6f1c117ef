"""Configuration and logging setup."""

from api_dashboard.core.config import Settings, get_settings
from api_dashboard.core.logging import setup_logging

__all__ = ["Settings", "get_settings", "setup_logging"]
