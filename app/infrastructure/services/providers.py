"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache
from pathlib import Path

from infrastructure.configuration import Settings
from infrastructure.i18n import Locale, LocaleResolver, Surface, Translator
from infrastructure.i18n.factory import create_translator, default_translations_dir
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.persistence import JSONFileStorage, KeyValueStorage


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translation_loader() -> YAMLTranslationLoader:
    """
    Get the application-scoped YAML loader.

    Shared by all translators so each table file is parsed once per process.
    """
    settings = get_settings()
    translations_dir = settings.i18n.TRANSLATIONS_DIR
    return YAMLTranslationLoader(
        translations_dir=(
            Path(translations_dir) if translations_dir else default_translations_dir()
        ),
    )


@lru_cache
def get_translator(surface: Surface) -> Translator:
    """
    Get the cached Translator for a surface's table.

    Usage:
        translator = get_translator(Surface.LMS)
        translator.translate("common.save", Locale.RU)
    """
    return create_translator(Surface(surface).value, loader=get_translation_loader())


@lru_cache
def get_locale_resolver() -> LocaleResolver:
    """
    Get the application-scoped LocaleResolver using the configured default locale.
    """
    settings = get_settings()
    return LocaleResolver(default_locale=Locale(settings.i18n.DEFAULT_LOCALE))


def get_client_storage() -> KeyValueStorage:
    """
    Get the durable client storage configured by LOCALE_STORAGE_PATH.

    Not cached: JSONFileStorage holds no state besides its path.
    """
    settings = get_settings()
    return JSONFileStorage(settings.i18n.LOCALE_STORAGE_PATH)
