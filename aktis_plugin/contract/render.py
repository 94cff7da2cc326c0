"""Human-readable rendering of collection envelopes.

Presentation only: automated consumers must read the machine-readable form.
"""

from datetime import datetime
from typing import List

from .models import CollectionEnvelope, SourceInfo


def render_banner(source: SourceInfo, started_at: datetime) -> str:
    """Render the start-of-run banner shown in interactive mode."""
    return (
        f"🔧 {source.name} v{source.version}\n"
        f"📍 Environment: {source.environment}\n"
        f"⏰ Started: {started_at.strftime('%Y-%m-%d %H:%M:%S')}\n"
    )


def render_error(cause: str) -> str:
    return f"❌ Error: {cause}"


def render_human_readable(envelope: CollectionEnvelope) -> str:
    """
    Render an envelope for a person at a terminal.

    Args:
        envelope: Envelope to render

    Returns:
        str: Multi-line text ending with a newline
    """
    if not envelope.success:
        lines = [
            render_error(envelope.error),
            "",
            "📊 Summary:",
            f"   Duration: {envelope.stats.duration}",
            f"   Payloads: {envelope.stats.item_count}",
            f"   Errors: {envelope.stats.error_count}",
            f"   Environment: {envelope.source.environment}",
        ]
        return "\n".join(lines) + "\n"

    lines: List[str] = [
        "✅ Collection completed successfully!",
        "",
        "📊 Summary:",
        f"   Duration: {envelope.stats.duration}",
        f"   Payloads: {envelope.stats.item_count}",
        f"   Environment: {envelope.source.environment}",
        "",
        "📦 Collected Data:",
    ]

    for index, item in enumerate(envelope.items, start=1):
        lines.append("")
        lines.append(f"{index}. {item.kind} [{item.timestamp.strftime('%H:%M:%S')}]")

        for key, value in item.data.items():
            lines.append(f"   • {key}: {value}")

        if item.metadata:
            pairs = " ".join(f"{key}={value}" for key, value in item.metadata.items())
            lines.append(f"   📋 Metadata: {pairs}")

    lines.append("")
    lines.append("🎉 Plugin execution completed!")
    return "\n".join(lines) + "\n"
