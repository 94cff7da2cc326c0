"""Tests for ExampleCollector."""

import pytest

from aktis_plugin.collectors.example_collector import ExampleCollector
from aktis_plugin.config.models import PluginConfig
from aktis_plugin.errors import CollectionFailure


class TestExampleCollector:
    """Test suite for ExampleCollector."""

    def test_collects_three_items_in_order(self, logger):
        items = ExampleCollector(logger=logger).collect()

        assert [i.kind for i in items] == [
            "system_status", "application_metrics", "business_metrics"
        ]

    def test_item_contents(self):
        system, app, business = ExampleCollector().collect()

        assert system.data["status"] == "healthy"
        assert system.metadata["platform"] == "example"
        assert app.metadata == {"service": "web-server", "version": "2.1.0"}
        assert business.data["active_users"] == 1250
        assert all(i.timestamp.tzinfo is not None for i in (system, app, business))

    def test_include_system_off(self):
        items = ExampleCollector(PluginConfig(include_system=False)).collect()
        assert [i.kind for i in items] == ["application_metrics", "business_metrics"]

    def test_disabled_raises_collection_failure(self):
        with pytest.raises(CollectionFailure, match="disabled"):
            ExampleCollector(PluginConfig(enabled=False)).collect()

    def test_source_info(self):
        source = ExampleCollector().source_info("production")

        assert source.name == "example-plugin"
        assert source.version == "1.0.0"
        assert source.kind.value == "data"
