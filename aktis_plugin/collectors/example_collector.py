"""Example collector demonstrating the output contract."""

import logging
import socket
from typing import List, Optional

from ..config.models import PluginConfig
from ..contract.envelope import new_item
from ..contract.models import CollectorType, Item
from ..errors import CollectionFailure
from .base import BaseCollector, safe_collect

PLUGIN_NAME = "example-plugin"
PLUGIN_VERSION = "1.0.0"


class ExampleCollector(BaseCollector):
    """
    Produces fixed system, application and business items.

    Stands in for real gathering logic so hosts can exercise the contract
    end to end.
    """

    name = PLUGIN_NAME
    kind = CollectorType.DATA
    version = PLUGIN_VERSION

    def __init__(self, config: Optional[PluginConfig] = None, logger: Optional[logging.Logger] = None):
        super().__init__(config or PluginConfig(), logger or logging.getLogger(__name__))

    @safe_collect
    def collect(self) -> List[Item]:
        """
        Collect example items.

        Returns:
            List[Item]: system_status (unless include_system is off),
            application_metrics and business_metrics, in that order

        Raises:
            CollectionFailure: If the collector is disabled in configuration
        """
        if not self.config.enabled:
            raise CollectionFailure("collector disabled by configuration")

        items = []

        if self.config.include_system:
            items.append(new_item(
                "system_status",
                data={
                    "uptime_seconds": 86400,
                    "status": "healthy",
                    "load_average": 0.75,
                },
                metadata={
                    "hostname": socket.gethostname() or "localhost",
                    "platform": "example",
                },
            ))

        items.append(new_item(
            "application_metrics",
            data={
                "requests_per_second": 150.5,
                "response_time_ms": 45.2,
                "error_rate": 0.01,
            },
            metadata={
                "service": "web-server",
                "version": "2.1.0",
            },
        ))

        items.append(new_item(
            "business_metrics",
            data={
                "active_users": 1250,
                "revenue_today": 15420.50,
                "conversion_rate": 0.035,
                "customer_satisfaction": 4.7,
            },
            metadata={
                "region": "us-east",
                "datacenter": "primary",
            },
        ))

        self.logger.debug(f"Collected {len(items)} example items (sample_rate={self.config.sample_rate}ms)")
        return items
