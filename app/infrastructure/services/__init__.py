"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import LocaleResolverDep, SettingsDep
from infrastructure.services.providers import (
    get_client_storage,
    get_locale_resolver,
    get_settings,
    get_translation_loader,
    get_translator,
)

__all__ = [
    "SettingsDep",
    "LocaleResolverDep",
    "get_settings",
    "get_translation_loader",
    "get_translator",
    "get_locale_resolver",
    "get_client_storage",
]
