from typing import Optional

from fastapi import APIRouter, HTTPException, Request

from api.dependencies.rate_limits import get_limiter
from core.logging import get_module_logger
from infrastructure.i18n import Locale, Surface
from infrastructure.services import LocaleResolverDep, SettingsDep, get_translator
from models.i18n import (
    LocaleInfo,
    LocalesResponse,
    MissingTranslationsResponse,
    SectionResponse,
    TranslationsResponse,
)

logger = get_module_logger()

router = APIRouter(prefix="/i18n", tags=["i18n"])
limiter = get_limiter()


def _negotiate(
    request: Request, locale: Optional[Locale], resolver: LocaleResolverDep
) -> Locale:
    """Explicit ?locale= wins, then Accept-Language, then the default."""
    if locale is not None:
        return locale
    return resolver.resolve_from_header(request.headers.get("accept-language"))


@router.get("/locales", response_model=LocalesResponse)
@limiter.limit("60/minute")
def get_locales(request: Request, settings: SettingsDep):  # pylint: disable=unused-argument
    """List the supported locales with their switcher metadata."""
    return LocalesResponse(
        default=settings.i18n.DEFAULT_LOCALE,
        locales=[
            LocaleInfo(
                code=locale.value,
                label=locale.label,
                name=locale.display_name,
                flag=locale.flag,
            )
            for locale in Locale
        ],
    )


@router.get("/{surface}/translations", response_model=TranslationsResponse)
@limiter.limit("60/minute")
def get_translations(
    request: Request,
    surface: Surface,
    resolver: LocaleResolverDep,
    locale: Optional[Locale] = None,
):
    """Return a surface's whole translation table resolved for one locale.

    Without ?locale= the locale is negotiated from Accept-Language.
    """
    resolved = _negotiate(request, locale, resolver)
    translator = get_translator(surface)
    messages = {key: translator.translate(key, resolved) for key in translator.keys()}
    logger.info(
        "served_translations",
        surface=surface.value,
        locale=resolved.value,
        key_count=len(messages),
    )
    return TranslationsResponse(
        surface=surface.value, locale=resolved.value, messages=messages
    )


@router.get("/{surface}/sections/{section}", response_model=SectionResponse)
@limiter.limit("60/minute")
def get_section(
    request: Request,
    surface: Surface,
    section: str,
    resolver: LocaleResolverDep,
    locale: Optional[Locale] = None,
):
    """Return one section of a surface's table resolved for one locale."""
    resolved = _negotiate(request, locale, resolver)
    messages = get_translator(surface).section(section, resolved)
    if not messages:
        raise HTTPException(
            status_code=404,
            detail=f"Section {section} not found for surface {surface.value}",
        )
    return SectionResponse(
        surface=surface.value,
        locale=resolved.value,
        section=section,
        messages=messages,
    )


@router.get("/{surface}/missing/{locale}", response_model=MissingTranslationsResponse)
@limiter.limit("60/minute")
def get_missing_translations(request: Request, surface: Surface, locale: Locale):  # pylint: disable=unused-argument
    """List keys of a surface's table that have no text for ``locale``."""
    keys = get_translator(surface).catalog.missing(locale)
    return MissingTranslationsResponse(
        surface=surface.value, locale=locale.value, count=len(keys), keys=keys
    )
