"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the FutureUp
localization service using Pydantic BaseSettings with domain-based
organization.

Exports:
    settings: Module-level Settings instance
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings: Locale defaults and per-surface storage keys
    ServerSettings: HTTP server settings

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()
    default_locale = settings.i18n.DEFAULT_LOCALE
    ```
"""

from infrastructure.configuration.localization import LocalizationSettings
from infrastructure.configuration.server import ServerSettings
from infrastructure.configuration.settings import Settings

settings = Settings()

__all__ = [
    "settings",
    "Settings",
    "LocalizationSettings",
    "ServerSettings",
]
