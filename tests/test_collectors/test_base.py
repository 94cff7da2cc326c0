"""Tests for BaseCollector, safe_collect and run_collection."""

import logging

import pytest

from aktis_plugin.collectors.base import BaseCollector, run_collection, safe_collect
from aktis_plugin.contract.models import CollectorType, SourceInfo
from aktis_plugin.errors import CollectionFailure, ConfigurationError
from tests.conftest import make_item


class MockCollector(BaseCollector):
    """Mock collector for testing BaseCollector functionality."""

    name = "mock"
    kind = CollectorType.EVENT
    version = "0.1.0"

    def __init__(self, items=None, error=None, logger=None):
        super().__init__({}, logger or logging.getLogger(__name__))
        self.items = items or []
        self.error = error

    @safe_collect
    def collect(self):
        """Mock collect method."""
        if self.error is not None:
            raise self.error
        return self.items


class TestBaseCollector:
    """Test suite for BaseCollector."""

    def test_source_info(self):
        source = MockCollector().source_info("production")

        assert source == SourceInfo(
            name="mock", kind=CollectorType.EVENT, version="0.1.0", environment="production"
        )

    def test_collector_logger_hierarchy(self):
        parent_logger = logging.getLogger("test_parent")
        collector = MockCollector(logger=parent_logger)

        assert collector.logger.parent == parent_logger
        assert collector.logger.name == "test_parent.MockCollector"

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            BaseCollector({}, logging.getLogger(__name__))


class TestSafeCollect:
    """Test suite for the safe_collect decorator."""

    def test_passes_items_through(self):
        items = [make_item()]
        assert MockCollector(items=items).collect() == items

    def test_collection_failure_unchanged(self):
        error = CollectionFailure("disk unreadable")

        with pytest.raises(CollectionFailure) as exc_info:
            MockCollector(error=error).collect()
        assert exc_info.value is error

    def test_unexpected_exception_converted(self, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(CollectionFailure) as exc_info:
                MockCollector(error=OSError("permission denied")).collect()

        assert exc_info.value.cause == "permission denied"
        assert isinstance(exc_info.value.__cause__, OSError)
        assert "Collection failed" in caplog.text

    def test_message_less_exception_uses_type_name(self):
        with pytest.raises(CollectionFailure) as exc_info:
            MockCollector(error=KeyError()).collect()
        assert exc_info.value.cause == "KeyError"


class TestRunCollection:
    """Test suite for run_collection."""

    def test_success_with_three_items(self, source):
        items = [make_item(), make_item("b"), make_item("c")]
        envelope = run_collection(source, lambda: items)

        assert envelope.success is True
        assert envelope.source.environment == "production"
        assert envelope.stats.item_count == 3

    def test_failure_becomes_envelope(self, source):
        def failing():
            raise CollectionFailure("disk unreadable")

        envelope = run_collection(source, failing)

        assert envelope.success is False
        assert envelope.error == "disk unreadable"
        assert envelope.stats.error_count == 1

    def test_empty_cause_gets_default_message(self, source):
        def failing():
            raise CollectionFailure("")

        assert run_collection(source, failing).error == "collection failed"

    def test_invalid_source_fails_before_collecting(self):
        calls = []
        source = SourceInfo(name="mock", environment="banana")

        with pytest.raises(ConfigurationError):
            run_collection(source, lambda: calls.append(1) or [])
        assert calls == []

    def test_other_exceptions_propagate(self, source):
        def broken():
            raise RuntimeError("bug")

        with pytest.raises(RuntimeError):
            run_collection(source, broken)

    def test_works_with_collector_method(self):
        collector = MockCollector(items=[make_item()])
        envelope = run_collection(collector.source_info("development"), collector.collect)

        assert envelope.source.name == "mock"
        assert envelope.stats.item_count == 1
