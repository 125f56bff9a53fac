"""Configuration."""
from convertaphile.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
