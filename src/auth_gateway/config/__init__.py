"""Configuration module for Auth Gateway."""

from auth_gateway.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
