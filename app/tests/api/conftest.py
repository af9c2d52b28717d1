"""Fixtures for API route tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router


@pytest.fixture
def app():
    """Application with the API routes and rate limiter, without lifespan."""
    application = FastAPI()
    setup_rate_limiter(application)
    application.include_router(api_router)
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def partial_tables(tmp_path, monkeypatch, fresh_providers):
    """Point the providers at tables with gaps in ru and az."""
    (tmp_path / "admin.yml").write_text(
        "common:\n"
        "  save: {az: Saxla, ru: Сохранить, en: Save}\n"
        "  cancel: {az: Ləğv et, ru: '', en: Cancel}\n",
        encoding="utf-8",
    )
    (tmp_path / "lms.yml").write_text(
        "greeting: {ru: 'Привет, {name}!', en: 'Hello, {name}!'}\n"
        "back: {az: Geri, ru: Назад, en: Back}\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("TRANSLATIONS_DIR", str(tmp_path))
    return tmp_path
