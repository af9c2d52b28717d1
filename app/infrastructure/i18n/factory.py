"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators from the
bundled translation tables.
"""

from pathlib import Path
from typing import Optional

from core.logging import get_module_logger
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.models import Locale
from infrastructure.i18n.translator import Translator

logger = get_module_logger()


def default_translations_dir() -> Path:
    """Bundled tables directory shipped with this package."""
    return Path(__file__).resolve().parent / "locales"


def create_translator(
    table: str,
    translations_dir: Optional[Path] = None,
    fallback_locale: Locale = Locale.EN,
    loader: Optional[YAMLTranslationLoader] = None,
) -> Translator:
    """Create a Translator for one translation table.

    Args:
        table: Table name, usually a surface ("admin", "lms").
        translations_dir: Directory with YAML tables (default: bundled tables).
        fallback_locale: Locale used when a variant is empty (default: en).
        loader: Pre-built loader to share a cache between translators.

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist.
        FileNotFoundError: If the table has no YAML file.

    Usage:
        translator = create_translator("lms")
        translator.translate("common.save", "ru")
    """
    if loader is None:
        loader = YAMLTranslationLoader(
            translations_dir=translations_dir or default_translations_dir(),
        )

    catalog = loader.load(table)
    translator = Translator(catalog, fallback_locale=fallback_locale)
    logger.info(
        "translator_created",
        table=table,
        translations_dir=str(loader.translations_dir),
    )
    return translator
