"""Per-surface localization context.

The admin back-office and the LMS each get a LocalizationContext built at
their composition root and passed down to the views that render text. A
context pairs the surface's LocaleStore with its Translator and exposes the
render-time helpers bound to the current locale.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from core.logging import get_module_logger
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.fields import LocalizedEntity, resolve_field
from infrastructure.i18n.models import Locale
from infrastructure.i18n.state import LocaleListener, LocaleStore, Subscription
from infrastructure.i18n.translator import Params, Translator
from infrastructure.persistence import KeyValueStorage

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


class Surface(str, Enum):
    """Independently localized UI contexts."""

    ADMIN = "admin"
    LMS = "lms"


class LocalizationContext:
    """Locale state and translations of one surface.

    Usage:
        ctx = create_localization_context(Surface.LMS, storage)
        ctx.t("greeting", {"name": "Kamran"})
        ctx.t_field(course, "title")
        ctx.set_locale("ru")
    """

    def __init__(self, surface: Surface, store: LocaleStore, translator: Translator):
        self.surface = surface
        self.store = store
        self.translator = translator

    @property
    def locale(self) -> Locale:
        return self.store.get_locale()

    def set_locale(self, locale) -> None:
        self.store.set_locale(locale)

    def subscribe(self, listener: LocaleListener) -> Subscription:
        return self.store.subscribe(listener)

    def t(self, key: str, params: Optional[Params] = None) -> str:
        """Translate ``key`` in the current locale."""
        return self.translator.translate(key, self.store.get_locale(), params)

    def t_field(self, entity: LocalizedEntity, field_prefix: str) -> str:
        """Resolve a localized record field in the current locale."""
        return resolve_field(entity, field_prefix, self.store.get_locale())

    def section(self, name: str) -> dict:
        """Translate a whole section in the current locale."""
        return self.translator.section(name, self.store.get_locale())


def storage_key_for(surface: Surface, settings: "Settings") -> str:
    """Storage key configured for ``surface``."""
    if surface == Surface.ADMIN:
        return settings.i18n.ADMIN_LOCALE_KEY
    return settings.i18n.LMS_LOCALE_KEY


def create_localization_context(
    surface: Surface,
    storage: KeyValueStorage,
    settings: Optional["Settings"] = None,
    translator: Optional[Translator] = None,
) -> LocalizationContext:
    """Build the localization context for one surface.

    Args:
        surface: Surface to build.
        storage: Client storage holding the persisted locale.
        settings: Settings (default: application settings provider).
        translator: Pre-built translator (default: the surface's bundled table).

    Returns:
        LocalizationContext with its store initialized from storage.
    """
    if settings is None:
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    surface = Surface(surface)
    store = LocaleStore(
        storage=storage,
        storage_key=storage_key_for(surface, settings),
        default_locale=settings.i18n.DEFAULT_LOCALE,
        surface=surface.value,
    )

    if translator is None:
        translations_dir = settings.i18n.TRANSLATIONS_DIR
        translator = create_translator(
            surface.value,
            translations_dir=Path(translations_dir) if translations_dir else None,
        )

    logger.info(
        "localization_context_created",
        surface=surface.value,
        locale=store.get_locale().value,
    )
    return LocalizationContext(surface, store, translator)
