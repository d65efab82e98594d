"""Core module for application configuration."""

from studio.core.config import get_settings, settings

__all__ = ["settings", "get_settings"]
