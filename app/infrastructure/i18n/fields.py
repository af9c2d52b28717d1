"""Localized field resolution for records with per-locale attributes.

Records coming from the backend store keep their text in three parallel
attributes sharing a prefix (``titleAz``, ``titleRu``, ``titleEn``). The
resolver picks the best populated variant for the requested locale, walking
a fixed per-locale fallback chain:

    ru -> Ru, En, Az
    en -> En, Az, Ru
    az (or anything unrecognized) -> Az, En, Ru

Both the admin back-office and the LMS use this module; it holds no state and
must be called on every render.
"""

from typing import Any, List, Mapping, Optional, Tuple, Union

from infrastructure.i18n.models import Locale

PLACEHOLDER = "—"

LocalizedEntity = Optional[Mapping[str, Any]]

FALLBACK_CHAINS: dict[Locale, Tuple[Locale, ...]] = {
    Locale.RU: (Locale.RU, Locale.EN, Locale.AZ),
    Locale.EN: (Locale.EN, Locale.AZ, Locale.RU),
    Locale.AZ: (Locale.AZ, Locale.EN, Locale.RU),
}


def fallback_chain(locale: Union[Locale, str, None]) -> Tuple[Locale, ...]:
    """Return the ordered locales tried for ``locale``.

    Only the exact codes "ru" and "en" select their own chains; anything
    else, including "RU" or "ru-RU", uses the ``az`` chain.
    """
    try:
        resolved = Locale(locale)
    except ValueError:
        resolved = Locale.AZ
    return FALLBACK_CHAINS[resolved]


def field_key(field_prefix: str, locale: Union[Locale, str]) -> str:
    """Build the attribute name for one locale (``"title", "ru" -> "titleRu"``)."""
    return f"{field_prefix}{Locale.from_string(locale).suffix}"


def localized_fields(field_prefix: str) -> List[str]:
    """List the three attribute names for a prefix, in Az/Ru/En order."""
    return [field_key(field_prefix, locale) for locale in Locale]


def resolve_field(
    entity: LocalizedEntity,
    field_prefix: str,
    locale: Union[Locale, str, None],
    placeholder: str = PLACEHOLDER,
) -> str:
    """Pick the best available localized value of a field.

    Args:
        entity: Record mapping attribute names to values, or None.
        field_prefix: Shared attribute prefix (e.g., "title", "name").
        locale: Requested locale.
        placeholder: Returned when nothing resolves (default: em dash).

    Returns:
        The first non-empty string found along the fallback chain, or
        ``placeholder``.

    Example:
        >>> resolve_field({"titleAz": "A", "titleRu": "", "titleEn": "E"}, "title", "ru")
        'E'
        >>> resolve_field(None, "title", "en")
        '—'
    """
    if entity is None:
        return placeholder

    for candidate in fallback_chain(locale):
        value = entity.get(f"{field_prefix}{candidate.suffix}")
        if isinstance(value, str) and value:
            return value

    return placeholder
