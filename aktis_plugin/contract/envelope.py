"""Envelope construction for collection runs."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Sequence

from ..errors import ConfigurationError
from ..utils.duration import format_duration
from ..utils.environment import ENVIRONMENTS
from .models import CollectionEnvelope, Item, RunStats, SourceInfo


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _elapsed(started_at: datetime, finished_at: datetime) -> timedelta:
    """Elapsed time between two timezone-aware instants."""
    for label, value in (("started_at", started_at), ("finished_at", finished_at)):
        if value.tzinfo is None or value.utcoffset() is None:
            raise ConfigurationError(f"{label} must be timezone-aware, got {value.isoformat()}")
    return finished_at - started_at


def validate_source(source: SourceInfo) -> None:
    """
    Check a source description before any output is produced.

    Raises:
        ConfigurationError: On an empty name or an unknown environment
    """
    if not source.name or not source.name.strip():
        raise ConfigurationError("source name must not be empty")
    if source.environment not in ENVIRONMENTS:
        raise ConfigurationError(
            f"unknown environment {source.environment!r}, "
            f"expected one of {', '.join(ENVIRONMENTS)}"
        )


def new_item(
    kind: str,
    data: Optional[Dict[str, Any]] = None,
    metadata: Optional[Dict[str, str]] = None,
    source_name: Optional[str] = None,
) -> Item:
    """Create an item stamped with the current time."""
    return Item(
        timestamp=_now(),
        source_name=source_name,
        kind=kind,
        data=data or {},
        metadata=metadata or {},
    )


def build_success_envelope(
    source: SourceInfo,
    items: Sequence[Item],
    started_at: datetime,
    *,
    finished_at: Optional[datetime] = None,
) -> CollectionEnvelope:
    """
    Build the envelope for a collection run that completed.

    Args:
        source: Producing plugin
        items: Collected items, in collection order
        started_at: When collection started
        finished_at: Envelope timestamp (default: now)

    Returns:
        CollectionEnvelope: success=True, no error, counts matching items

    Raises:
        ConfigurationError: If source is malformed or a timestamp is naive
    """
    validate_source(source)
    now = finished_at or _now()
    items = list(items)

    return CollectionEnvelope(
        success=True,
        timestamp=now,
        items=items,
        source=source,
        stats=RunStats(
            duration=format_duration(_elapsed(started_at, now)),
            item_count=len(items),
        ),
    )


def build_failure_envelope(
    source: SourceInfo,
    cause: str,
    started_at: datetime,
    *,
    finished_at: Optional[datetime] = None,
) -> CollectionEnvelope:
    """
    Build the envelope for a collection run that failed.

    Args:
        source: Producing plugin
        cause: Human-readable failure cause, must not be empty
        started_at: When collection started
        finished_at: Envelope timestamp (default: now)

    Returns:
        CollectionEnvelope: success=False, no items, error_count 1

    Raises:
        ConfigurationError: If source is malformed or cause is empty,
            or a timestamp is naive
    """
    validate_source(source)
    if not cause:
        raise ConfigurationError("failure cause must not be empty")
    now = finished_at or _now()

    return CollectionEnvelope(
        success=False,
        timestamp=now,
        items=[],
        error=cause,
        source=source,
        stats=RunStats(
            duration=format_duration(_elapsed(started_at, now)),
            item_count=0,
            error_count=1,
        ),
    )
