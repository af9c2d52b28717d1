"""Unit tests for infrastructure.events.models module."""

from datetime import datetime
from uuid import UUID

import pytest

from infrastructure.events import Event
from infrastructure.events.models import LOCALE_CHANGED


@pytest.mark.unit
class TestEvent:
    """Test suite for the Event base class."""

    def test_defaults(self):
        event = Event(event_type="something.happened")
        assert isinstance(event.timestamp, datetime)
        assert isinstance(event.correlation_id, UUID)
        assert event.metadata == {}

    def test_to_dict(self):
        event = Event(event_type="x", metadata={"k": "v"})
        data = event.to_dict()
        assert data["event_type"] == "x"
        assert data["metadata"] == {"k": "v"}
        assert data["timestamp"] == event.timestamp.isoformat()
        assert data["correlation_id"] == str(event.correlation_id)

    def test_hashable(self):
        event = Event(event_type="x")
        assert event in {event}


@pytest.mark.unit
class TestLocaleChangedEvent:
    """Test suite for LocaleChangedEvent."""

    def test_event_type(self, locale_event):
        assert locale_event.event_type == LOCALE_CHANGED == "locale.changed"

    def test_fields(self, locale_event):
        assert locale_event.locale == "ru"
        assert locale_event.previous_locale == "az"
        assert locale_event.surface == "lms"

    def test_to_dict(self, locale_event):
        data = locale_event.to_dict()
        assert data["locale"] == "ru"
        assert data["surface"] == "lms"

    def test_hashable(self, locale_event):
        assert len({locale_event, locale_event}) == 1
