"""i18n system - localization for the admin and LMS surfaces.

Main components:
- models: Locale, TranslationEntry, TranslationCatalog
- fields: resolve_field() picks the best localized record attribute
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator with {name} placeholder substitution
- state: LocaleStore, the persisted per-surface locale with change events
- resolvers: LocaleResolver for header/path/string locale detection
- surfaces: Surface and LocalizationContext composition helpers
"""

from infrastructure.i18n.fields import (
    PLACEHOLDER,
    fallback_chain,
    field_key,
    localized_fields,
    resolve_field,
)
from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import Locale, TranslationCatalog, TranslationEntry
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.state import LocaleStore, Subscription
from infrastructure.i18n.translator import Translator
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.surfaces import (
    LocalizationContext,
    Surface,
    create_localization_context,
)

__all__ = [
    "Locale",
    "TranslationEntry",
    "TranslationCatalog",
    "PLACEHOLDER",
    "fallback_chain",
    "field_key",
    "localized_fields",
    "resolve_field",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "create_translator",
    "LocaleResolver",
    "LocaleStore",
    "Subscription",
    "Surface",
    "LocalizationContext",
    "create_localization_context",
]
