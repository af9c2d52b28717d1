"""FutureUp configuration settings."""

from infrastructure.configuration import Settings, settings

__all__ = ["Settings", "settings"]
