"""Fixtures for infrastructure.events tests."""

import pytest

from infrastructure.events import EventEmitter, LocaleChangedEvent


@pytest.fixture
def emitter():
    return EventEmitter(name="test")


@pytest.fixture
def locale_event():
    """Sample change event for the LMS surface."""
    return LocaleChangedEvent(locale="ru", previous_locale="az", surface="lms")
