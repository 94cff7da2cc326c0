"""Elapsed-time rendering in the host's duration notation."""

from datetime import timedelta
from typing import Union

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000


def _fraction(value: int, unit: int) -> str:
    """Render value/unit with trailing zeros trimmed, e.g. 1500/1000 -> '1.5'."""
    whole, rest = divmod(value, unit)
    if rest == 0:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{rest:0{digits}d}".rstrip("0")


def format_duration(elapsed: Union[timedelta, float]) -> str:
    """
    Render an elapsed time the way the collector host prints durations.

    Examples: "0s", "850ns", "1.5µs", "45.2ms", "2.5s", "1m30s", "1h0m0s".
    Negative inputs are clamped to zero.

    Args:
        elapsed: Elapsed time as a timedelta or a number of seconds

    Returns:
        str: Human-readable duration
    """
    seconds = elapsed.total_seconds() if isinstance(elapsed, timedelta) else float(elapsed)
    ns = max(0, round(seconds * _NS_PER_S))

    if ns == 0:
        return "0s"
    if ns < _NS_PER_US:
        return f"{ns}ns"
    if ns < _NS_PER_MS:
        return f"{_fraction(ns, _NS_PER_US)}µs"
    if ns < _NS_PER_S:
        return f"{_fraction(ns, _NS_PER_MS)}ms"

    hours, ns = divmod(ns, 3600 * _NS_PER_S)
    minutes, ns = divmod(ns, 60 * _NS_PER_S)
    out = f"{_fraction(ns, _NS_PER_S)}s"
    if hours or minutes:
        out = f"{minutes}m" + out
    if hours:
        out = f"{hours}h" + out
    return out
