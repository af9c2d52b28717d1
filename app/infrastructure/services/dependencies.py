"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import LocaleResolver
from infrastructure.services.providers import get_locale_resolver, get_settings

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Locale resolver dependency (Accept-Language negotiation, path prefixes)
LocaleResolverDep = Annotated[LocaleResolver, Depends(get_locale_resolver)]

__all__ = [
    "SettingsDep",
    "LocaleResolverDep",
]
