"""Shared pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from aktis_plugin.contract.models import CollectorType, Item, SourceInfo
from aktis_plugin.utils.logger import setup_logger


FINISHED_AT = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)
STARTED_AT = FINISHED_AT - timedelta(milliseconds=1500)


@pytest.fixture
def logger():
    """Create logger for tests."""
    return setup_logger("test")


@pytest.fixture
def source():
    """A valid production source description."""
    return SourceInfo(
        name="example-plugin",
        kind=CollectorType.DATA,
        version="1.0.0",
        environment="production",
    )


def make_item(kind="system_status", data=None, metadata=None, seconds_before_finish=1):
    return Item(
        timestamp=FINISHED_AT - timedelta(seconds=seconds_before_finish),
        kind=kind,
        data={"status": "healthy", "load_average": 0.75} if data is None else data,
        metadata={"hostname": "localhost"} if metadata is None else metadata,
    )


@pytest.fixture
def items():
    """Three items in collection order."""
    return [
        make_item("system_status"),
        make_item("application_metrics", data={"requests_per_second": 150.5}, metadata={"service": "web-server"}),
        make_item("business_metrics", data={"active_users": 1250, "up": True}, metadata={}),
    ]
