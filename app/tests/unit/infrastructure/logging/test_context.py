"""Unit tests for infrastructure.logging.context module.

Tests cover:
- bind_request_context() context manager
- get_correlation_id()
- Context cleanup
"""

import uuid

import pytest
import structlog

from infrastructure.logging.context import bind_request_context, get_correlation_id


@pytest.mark.unit
class TestBindRequestContext:
    """Test suite for bind_request_context context manager."""

    def test_auto_generates_correlation_id(self):
        """Correlation ID is auto-generated if not provided."""
        with bind_request_context():
            correlation_id = get_correlation_id()
            assert correlation_id is not None
            uuid.UUID(correlation_id)

    def test_uses_provided_correlation_id(self):
        with bind_request_context(correlation_id="req-123"):
            assert get_correlation_id() == "req-123"

    def test_binds_request_fields(self):
        with bind_request_context(request_path="/api/v1/i18n/locales", request_method="GET"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["request_path"] == "/api/v1/i18n/locales"
            assert ctx["request_method"] == "GET"

    def test_binds_extra_context(self):
        with bind_request_context(locale="ru", surface="lms"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["locale"] == "ru"
            assert ctx["surface"] == "lms"

    def test_unset_fields_not_bound(self):
        with bind_request_context():
            assert "request_path" not in structlog.contextvars.get_contextvars()

    def test_context_cleared_after_exit(self):
        with bind_request_context(correlation_id="req-1", locale="az"):
            pass
        assert get_correlation_id() is None
        assert "locale" not in structlog.contextvars.get_contextvars()

    def test_context_cleared_after_exception(self):
        with pytest.raises(RuntimeError):
            with bind_request_context(correlation_id="req-2"):
                raise RuntimeError("boom")
        assert get_correlation_id() is None

    def test_get_correlation_id_outside_context(self):
        assert get_correlation_id() is None
