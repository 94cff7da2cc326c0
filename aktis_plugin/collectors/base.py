"""Base collector abstract class and the collection runner."""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Callable, List, Optional, Sequence

from ..contract.envelope import (
    build_failure_envelope,
    build_success_envelope,
    validate_source,
)
from ..contract.models import CollectionEnvelope, CollectorType, Item, SourceInfo
from ..errors import CollectionFailure


class BaseCollector(ABC):
    """Abstract base class for all collector plugins."""

    name: str = "base"
    kind: CollectorType = CollectorType.DATA
    version: str = "dev"

    def __init__(self, config: Any, logger: logging.Logger):
        """
        Initialize base collector.

        Args:
            config: Collector-specific configuration
            logger: Logger instance
        """
        self.config = config
        self.logger = logger.getChild(self.__class__.__name__)

    @abstractmethod
    def collect(self) -> List[Item]:
        """
        Collect items in collection order.

        Returns:
            List[Item]: Collected items

        Raises:
            CollectionFailure: If gathering failed

        Note:
            Implementations should use the @safe_collect decorator so that
            unexpected exceptions surface as CollectionFailure.
        """
        pass

    def source_info(self, environment: str) -> SourceInfo:
        """Describe this collector for the given runtime environment."""
        return SourceInfo(
            name=self.name,
            kind=self.kind,
            version=self.version,
            environment=environment,
        )


def safe_collect(func):
    """
    Decorator turning unexpected collector exceptions into CollectionFailure.

    Args:
        func: Collector method to wrap

    Returns:
        Wrapped function that logs and re-raises as CollectionFailure
    """
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except CollectionFailure:
            raise
        except Exception as e:
            self.logger.error(f"Collection failed: {e}", exc_info=True)
            raise CollectionFailure(str(e) or type(e).__name__) from e
    return wrapper


def run_collection(
    source: SourceInfo,
    collect_fn: Callable[[], Sequence[Item]],
    started_at: Optional[datetime] = None,
    logger: Optional[logging.Logger] = None
) -> CollectionEnvelope:
    """
    Run one collection pass and build its envelope.

    The source is validated before collection starts. A CollectionFailure
    becomes a failure envelope; there are no retries.

    Args:
        source: Producing plugin
        collect_fn: Plugin-specific gathering step
        started_at: Start of the run (default: now)
        logger: Optional logger

    Returns:
        CollectionEnvelope: Success or failure envelope

    Raises:
        ConfigurationError: If source is malformed
    """
    logger = logger or logging.getLogger(__name__)
    started_at = started_at or datetime.now(timezone.utc)

    validate_source(source)
    logger.debug(f"Starting collection for {source.name} ({source.environment})")

    try:
        items = collect_fn()
    except CollectionFailure as e:
        cause = e.cause or "collection failed"
        logger.warning(f"Collection for {source.name} failed: {cause}")
        return build_failure_envelope(source, cause, started_at)

    envelope = build_success_envelope(source, items, started_at)
    logger.info(
        f"Collection for {source.name} completed",
        extra={
            "item_count": envelope.stats.item_count,
            "duration": envelope.stats.duration,
        }
    )
    return envelope
