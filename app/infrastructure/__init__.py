"""Infrastructure modules for the FutureUp localization service.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings)
- logging: Structured logging (configure_logging, get_module_logger)
- events: Instance-owned event emitter and event models
- i18n: Locales, localized-field resolution, translation tables, locale state
- persistence: Client key-value storage backing the locale state
- services: Dependency injection services (SettingsDep, get_settings)
"""

from infrastructure.configuration import settings

__all__ = ["settings"]
