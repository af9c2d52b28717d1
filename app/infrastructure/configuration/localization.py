"""Localization feature settings."""

from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator

from infrastructure.configuration.base import FeatureSettings


class LocalizationSettings(FeatureSettings):
    """Localization configuration for the admin and LMS surfaces.

    Each surface persists its locale under its own storage key, so the two
    keys must never be equal.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when nothing is persisted (default: az)
        ADMIN_LOCALE_KEY: Storage key for the admin surface locale
        LMS_LOCALE_KEY: Storage key for the LMS surface locale
        TRANSLATIONS_DIR: Directory holding the <surface>.yml tables
            (default: bundled infrastructure/i18n/locales)
        LOCALE_STORAGE_PATH: JSON file used as the durable client store
        I18N_PRELOAD: Load translation tables at startup (default: true)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        key = settings.i18n.LMS_LOCALE_KEY
        ```
    """

    DEFAULT_LOCALE: Literal["az", "ru", "en"] = Field(
        default="az", alias="I18N_DEFAULT_LOCALE"
    )
    ADMIN_LOCALE_KEY: str = Field(
        default="futureup-admin-locale", alias="ADMIN_LOCALE_KEY"
    )
    LMS_LOCALE_KEY: str = Field(default="futureup-lms-locale", alias="LMS_LOCALE_KEY")
    TRANSLATIONS_DIR: Optional[str] = Field(default=None, alias="TRANSLATIONS_DIR")
    LOCALE_STORAGE_PATH: str = Field(
        default=".futureup/storage.json", alias="LOCALE_STORAGE_PATH"
    )
    PRELOAD: bool = Field(default=True, alias="I18N_PRELOAD")

    @field_validator("DEFAULT_LOCALE", mode="before")
    @classmethod
    def _normalize_locale(cls, v):
        """Accept locale codes in any case ("RU" -> "ru")."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode="after")
    def _check_distinct_keys(self) -> "LocalizationSettings":
        if self.ADMIN_LOCALE_KEY == self.LMS_LOCALE_KEY:
            raise ValueError(
                "ADMIN_LOCALE_KEY and LMS_LOCALE_KEY must be different "
                f"(both set to {self.ADMIN_LOCALE_KEY!r})"
            )
        return self
