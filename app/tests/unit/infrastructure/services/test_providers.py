"""Unit tests for infrastructure.services.providers module."""

import pytest

from infrastructure.configuration import Settings
from infrastructure.i18n import Locale, LocaleResolver, Surface, Translator
from infrastructure.persistence import JSONFileStorage
from infrastructure.services import providers



pytestmark = pytest.mark.usefixtures("fresh_providers")


@pytest.mark.unit
class TestProviders:
    """Test suite for the application-scoped providers."""

    def test_get_settings_singleton(self):
        settings = providers.get_settings()
        assert isinstance(settings, Settings)
        assert providers.get_settings() is settings

    def test_get_translator_per_surface(self):
        admin = providers.get_translator(Surface.ADMIN)
        lms = providers.get_translator(Surface.LMS)
        assert isinstance(admin, Translator)
        assert admin.catalog.name == "admin"
        assert lms.catalog.name == "lms"
        assert providers.get_translator(Surface.LMS) is lms

    def test_get_translator_unknown_surface(self):
        with pytest.raises(ValueError):
            providers.get_translator("public")

    def test_translation_loader_honours_settings(self, monkeypatch, tmp_path):
        (tmp_path / "lms.yml").write_text("hello:\n  en: Hi\n", encoding="utf-8")
        monkeypatch.setenv("TRANSLATIONS_DIR", str(tmp_path))
        translator = providers.get_translator(Surface.LMS)
        assert translator.translate("hello", "ru") == "Hi"

    def test_get_locale_resolver_uses_default_locale(self, monkeypatch):
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "en")
        resolver = providers.get_locale_resolver()
        assert isinstance(resolver, LocaleResolver)
        assert resolver.default_locale == Locale.EN

    def test_get_client_storage(self, monkeypatch, tmp_path):
        path = tmp_path / "storage.json"
        monkeypatch.setenv("LOCALE_STORAGE_PATH", str(path))
        storage = providers.get_client_storage()
        assert isinstance(storage, JSONFileStorage)
        assert storage.path == path
