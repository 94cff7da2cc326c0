from .base import BaseCollector, run_collection, safe_collect
from .example_collector import ExampleCollector

__all__ = ["BaseCollector", "ExampleCollector", "run_collection", "safe_collect"]
