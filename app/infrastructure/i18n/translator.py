"""Translation table lookup with placeholder substitution.

Missing translations are never errors: an unknown key comes back unchanged
so gaps stay visible in the UI, and an empty or unsupported locale falls back to
English.
"""

import re
from typing import Dict, List, Mapping, Optional, Union

from core.logging import get_module_logger
from infrastructure.i18n.models import Locale, TranslationCatalog

logger = get_module_logger()

Params = Mapping[str, Union[str, int, float]]

_PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


class Translator:
    """Looks up UI strings in one surface's translation table.

    Attributes:
        catalog: TranslationCatalog being served.
        fallback_locale: Locale used when the requested variant is empty.
    """

    def __init__(
        self,
        catalog: TranslationCatalog,
        fallback_locale: Locale = Locale.EN,
    ):
        self.catalog = catalog
        self.fallback_locale = fallback_locale
        logger.info(
            "initialized_translator",
            table=catalog.name,
            key_count=len(catalog.entries),
            fallback_locale=fallback_locale.value,
        )

    def translate(
        self,
        key: str,
        locale: Union[Locale, str, None],
        params: Optional[Params] = None,
    ) -> str:
        """Resolve ``key`` for ``locale`` and substitute ``{name}`` placeholders.

        An unsupported ``locale`` (anything but the exact codes) goes
        straight to the fallback-locale text.

        Args:
            key: Translation key (e.g., "common.save", "greeting").
            locale: Locale to translate to.
            params: Optional mapping of placeholder name to value.

        Returns:
            Translated text, the fallback-locale text, or ``key`` itself.
        """
        try:
            requested: Optional[Locale] = Locale(locale)
        except ValueError:
            logger.debug("unsupported_translation_locale", key=key, locale=locale)
            requested = None

        entry = self.catalog.get_entry(key)
        if entry is None:
            logger.debug("translation_key_not_found", key=key, locale=locale)
            return key

        text = entry.text_for(requested) if requested is not None else None
        if text is None:
            text = entry.text_for(self.fallback_locale)
            if text is None:
                logger.debug(
                    "translation_not_found",
                    key=key,
                    locale=locale,
                    fallback_locale=self.fallback_locale.value,
                )
                return key
            logger.debug(
                "used_fallback_translation",
                key=key,
                requested_locale=locale,
                fallback_locale=self.fallback_locale.value,
            )

        if params:
            text = self._interpolate(text, params)
        return text

    def section(self, name: str, locale: Union[Locale, str]) -> Dict[str, str]:
        """Resolve every key of a dotted section for ``locale``.

        Args:
            name: Section name (e.g., "common").
            locale: Locale to translate to.

        Returns:
            Mapping of key suffix to translated text, with the same fallback
            rules as translate().
        """
        return {
            sub_key: self.translate(f"{name}.{sub_key}", locale)
            for sub_key in self.catalog.section(name)
        }

    def has_key(self, key: str) -> bool:
        return self.catalog.has_key(key)

    def keys(self) -> List[str]:
        return self.catalog.keys()

    def _interpolate(self, text: str, params: Params) -> str:
        """Replace every ``{name}`` with ``str(params[name])`` in one pass.

        Substituted values are never scanned again, so a value containing
        ``{other}`` is emitted literally. Placeholders without a matching
        parameter stay as written.
        """

        def _replace(match: "re.Match[str]") -> str:
            name = match.group(1)
            if name in params:
                return str(params[name])
            return match.group(0)

        return _PLACEHOLDER_PATTERN.sub(_replace, text)
