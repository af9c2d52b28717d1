"""Translation models for i18n system.

Defines the supported locales and the per-key translation table structures.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional


class Locale(str, Enum):
    """Supported display languages.

    The set is fixed; ``az`` is the system default.
    """

    AZ = "az"
    RU = "ru"
    EN = "en"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Matching is case-insensitive and ignores a region part, so "RU" and
        "ru-RU" both resolve to ``Locale.RU``.

        Args:
            locale_str: Locale string (e.g., "az", "ru", "en-US").

        Returns:
            Matching Locale enum value.

        Raises:
            ValueError: If locale string is not supported.
        """
        if isinstance(locale_str, cls):
            return locale_str
        normalized = str(locale_str).strip().replace("_", "-").split("-")[0].lower()
        try:
            return cls(normalized)
        except ValueError as e:
            raise ValueError(f"Unsupported locale: {locale_str}") from e

    @classmethod
    def default(cls) -> "Locale":
        """System default locale."""
        return cls.AZ

    @property
    def suffix(self) -> str:
        """Field-name suffix for this locale ("Az", "Ru", "En")."""
        return self.value.capitalize()

    @property
    def display_name(self) -> str:
        """Native language name shown in language switchers."""
        return _DISPLAY_NAMES[self]

    @property
    def label(self) -> str:
        """Short uppercase label ("AZ", "RU", "EN")."""
        return self.value.upper()

    @property
    def flag(self) -> str:
        """Flag emoji shown next to the label."""
        return _FLAGS[self]


_DISPLAY_NAMES = {
    Locale.AZ: "Azərbaycan",
    Locale.RU: "Русский",
    Locale.EN: "English",
}

_FLAGS = {
    Locale.AZ: "🇦🇿",
    Locale.RU: "🇷🇺",
    Locale.EN: "🇬🇧",
}


@dataclass(frozen=True)
class TranslationEntry:
    """One UI string in every supported locale.

    Attributes:
        az: Azerbaijani text.
        ru: Russian text.
        en: English text, the ultimate fallback.
    """

    az: Optional[str] = None
    ru: Optional[str] = None
    en: Optional[str] = None

    def text_for(self, locale: Locale) -> Optional[str]:
        """Return the text for ``locale``, or None when empty or missing."""
        value = getattr(self, Locale.from_string(locale).value)
        if isinstance(value, str) and value:
            return value
        return None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TranslationEntry":
        """Build an entry from a ``{"az": ..., "ru": ..., "en": ...}`` mapping.

        Unknown keys are ignored; non-string values are converted with str().
        """
        values = {}
        for locale in Locale:
            raw = data.get(locale.value)
            values[locale.value] = None if raw is None else str(raw)
        return cls(**values)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {locale.value: getattr(self, locale.value) for locale in Locale}


@dataclass
class TranslationCatalog:
    """Translation table for one UI surface.

    Keys are dot-separated paths ("common.save", "sidebar.courses") or flat
    names ("greeting"). Each key maps to a TranslationEntry.

    Attributes:
        name: Table name, usually the surface ("admin", "lms").
        entries: Mapping of key to TranslationEntry.
        loaded_at: Timestamp (ISO 8601) when the table was loaded.
    """

    name: str
    entries: Dict[str, TranslationEntry] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def get_entry(self, key: str) -> Optional[TranslationEntry]:
        return self.entries.get(key)

    def set_entry(self, key: str, entry: TranslationEntry) -> None:
        self.entries[key] = entry

    def has_key(self, key: str) -> bool:
        return key in self.entries

    def keys(self) -> List[str]:
        return list(self.entries.keys())

    def section(self, name: str) -> Dict[str, TranslationEntry]:
        """Get all entries under a dotted section.

        Args:
            name: Section prefix (e.g., "common").

        Returns:
            Mapping of the remaining key part (e.g., "save") to its entry.
        """
        prefix = f"{name}."
        return {
            key[len(prefix) :]: entry
            for key, entry in self.entries.items()
            if key.startswith(prefix)
        }

    def missing(self, locale: Locale) -> List[str]:
        """List keys that have no text for ``locale``.

        Args:
            locale: Locale to audit.

        Returns:
            Sorted list of keys whose ``locale`` variant is empty or absent.
        """
        return sorted(
            key
            for key, entry in self.entries.items()
            if entry.text_for(locale) is None
        )

    def merge(self, other: "TranslationCatalog") -> None:
        """Merge another catalog into this one.

        Later entries override earlier ones.
        """
        self.entries.update(other.entries)
