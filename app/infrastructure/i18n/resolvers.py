"""Locale resolution logic for determining the requested language.

Resolves a Locale from raw strings, persisted values, Accept-Language
headers and public-site URL paths. The public site prefixes every path with
its locale ("/ru/courses") except for the default locale, which is served
without a prefix ("/courses").
"""

from typing import Optional, Tuple, Union

from core.logging import get_module_logger
from infrastructure.i18n.models import Locale

logger = get_module_logger()


class LocaleResolver:
    """Resolves the locale from various request sources.

    Every method except resolve_from_string() falls back to the default
    locale instead of raising.
    """

    def __init__(self, default_locale: Locale = Locale.AZ):
        """Initialize locale resolver.

        Args:
            default_locale: Fallback locale when no preference found.
        """
        self.default_locale = default_locale
        self.log = logger.bind(default_locale=default_locale.value)

    def resolve_from_string(self, locale_str: str) -> Locale:
        """Parse and validate locale string.

        Raises:
            ValueError: If locale_str is not supported.
        """
        try:
            return Locale.from_string(locale_str)
        except ValueError:
            self.log.warning("invalid_locale_string", locale_str=locale_str)
            raise

    def coerce(self, value: Union[Locale, str, None]) -> Locale:
        """Parse ``value``, returning the default locale when it is absent or invalid."""
        if value is None or value == "":
            return self.default_locale
        try:
            return Locale.from_string(value)
        except ValueError:
            self.log.debug("coerced_invalid_locale", value=value)
            return self.default_locale

    def resolve_from_header(self, accept_language: Optional[str]) -> Locale:
        """Resolve locale from an HTTP Accept-Language header.

        Parses "ru-RU,ru;q=0.9,en;q=0.8" into quality-ordered language ranges
        and returns the first supported one; ranges with q=0 are skipped.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            Resolved Locale, or default if none match.
        """
        if not accept_language:
            return self.default_locale

        preferences = []
        for position, part in enumerate(accept_language.split(",")):
            lang_range = part.split(";")[0].strip()
            if not lang_range:
                continue
            quality = 1.0

            if ";" in part and "q=" in part:
                try:
                    quality = float(part.split("q=")[1])
                except ValueError:
                    quality = 1.0

            if quality <= 0:
                continue
            preferences.append((lang_range, quality, position))

        # Highest quality first; header order breaks ties
        for lang_range, _, _ in sorted(preferences, key=lambda x: (-x[1], x[2])):
            try:
                locale = Locale.from_string(lang_range)
            except ValueError:
                continue
            self.log.debug("resolved_from_header", locale=locale.value)
            return locale

        self.log.debug("no_matching_locale_in_header", header=accept_language)
        return self.default_locale

    def resolve_from_path(self, path: str) -> Tuple[Locale, str]:
        """Split a public-site path into its locale and the remaining path.

        Args:
            path: URL path (e.g., "/ru/courses/python").

        Returns:
            (locale, path without the locale prefix). Paths without a
            supported prefix resolve to the default locale unchanged.

        Example:
            >>> LocaleResolver().resolve_from_path("/ru/courses")
            (<Locale.RU: 'ru'>, '/courses')
        """
        segments = path.lstrip("/").split("/", 1)
        head = segments[0]
        if head in {locale.value for locale in Locale}:
            rest = segments[1] if len(segments) > 1 else ""
            return Locale(head), "/" + rest
        return self.default_locale, path or "/"

    def localized_path(self, path: str, locale: Union[Locale, str]) -> str:
        """Build the public-site path for ``locale``.

        The default locale is served without a prefix.

        Example:
            >>> LocaleResolver().localized_path("/certificate/ABC123", "ru")
            '/ru/certificate/ABC123'
        """
        locale = Locale.from_string(locale)
        _, bare_path = self.resolve_from_path(path)
        if not bare_path.startswith("/"):
            bare_path = "/" + bare_path
        if locale == self.default_locale:
            return bare_path
        if bare_path == "/":
            return f"/{locale.value}"
        return f"/{locale.value}{bare_path}"
