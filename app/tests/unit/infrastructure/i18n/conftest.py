"""Feature-level fixtures for i18n system tests.

Provides translation tables, storage and store fixtures for locale
resolution and translation scenarios.
"""

import pytest
import yaml

from infrastructure.configuration import Settings
from infrastructure.i18n import (
    LocaleStore,
    TranslationCatalog,
    TranslationEntry,
    Translator,
    YAMLTranslationLoader,
)
from infrastructure.persistence import InMemoryStorage


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation tables.

    Returns a directory structure like:
    - admin.yml
    - admin.extra.yml
    - lms.yml
    """
    admin = {
        "common": {
            "save": {"az": "Saxla", "ru": "Сохранить", "en": "Save"},
            "cancel": {"az": "Ləğv et", "ru": "Отмена", "en": "Cancel"},
        },
        "courses": {
            "title": {"az": "Kurslar", "ru": "", "en": "Courses"},
            "pageOf": {
                "az": "Səhifə {page} / {total}",
                "ru": "Страница {page} из {total}",
                "en": "Page {page} of {total}",
            },
        },
    }
    with open(tmp_path / "admin.yml", "w", encoding="utf-8") as f:
        yaml.dump(admin, f, allow_unicode=True)

    admin_extra = {
        "common": {
            "save": {"az": "Yadda saxla", "ru": "Сохранить", "en": "Save"},
        }
    }
    with open(tmp_path / "admin.extra.yml", "w", encoding="utf-8") as f:
        yaml.dump(admin_extra, f, allow_unicode=True)

    lms = {
        "greeting": {"az": "Salam, {name}!", "ru": "Привет, {name}!", "en": "Hello, {name}!"},
        "azOnly": {"az": "Yalnız az"},
        "enOnly": {"en": "Only en"},
    }
    with open(tmp_path / "lms.yml", "w", encoding="utf-8") as f:
        yaml.dump(lms, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def greeting_catalog():
    """In-memory table with the greeting example and a Russian-only gap."""
    return TranslationCatalog(
        name="lms",
        entries={
            "greeting": TranslationEntry(ru="Привет, {name}!", en="Hello, {name}!"),
            "common.save": TranslationEntry(az="Saxla", ru="Сохранить", en="Save"),
            "common.cancel": TranslationEntry(az="Ləğv et", ru="", en="Cancel"),
            "azOnly": TranslationEntry(az="Yalnız az"),
        },
    )


@pytest.fixture
def translator(greeting_catalog):
    return Translator(greeting_catalog)


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def lms_store(storage):
    return LocaleStore(storage, storage_key="futureup-lms-locale", surface="lms")


@pytest.fixture
def admin_store(storage):
    return LocaleStore(storage, storage_key="futureup-admin-locale", surface="admin")


@pytest.fixture
def i18n_settings(temp_translations_dir, monkeypatch):
    """Settings pointing at the temporary tables."""
    monkeypatch.setenv("TRANSLATIONS_DIR", str(temp_translations_dir))
    return Settings()


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_ru": "ru",
        "regional_ru": "ru-RU",
        "with_quality": "ru-RU,ru;q=0.9,en;q=0.8",
        "prefers_en": "de-DE,de;q=0.9,en;q=0.8,ru;q=0.7",
        "unsupported": "de-DE,fr;q=0.9",
        "wildcard": "*",
        "invalid_quality": "en;q=invalid,ru",
        "zero_quality": "ru;q=0,en;q=0.5",
    }
