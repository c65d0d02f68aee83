"""Configuration module for the Aave markets reader."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
