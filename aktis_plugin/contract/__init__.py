"""Plugin output contract: models, construction, encoding and rendering."""

from .codec import (
    SchemaVariant,
    decode_machine_readable,
    encode_machine_readable,
    envelope_to_dict,
    write_machine_readable,
)
from .envelope import (
    build_failure_envelope,
    build_success_envelope,
    new_item,
    validate_source,
)
from .models import CollectionEnvelope, CollectorType, Item, RunStats, SourceInfo
from .render import render_banner, render_error, render_human_readable
from .status import PluginStatus

__all__ = [
    "CollectionEnvelope",
    "CollectorType",
    "Item",
    "PluginStatus",
    "RunStats",
    "SchemaVariant",
    "SourceInfo",
    "build_failure_envelope",
    "build_success_envelope",
    "decode_machine_readable",
    "encode_machine_readable",
    "envelope_to_dict",
    "new_item",
    "render_banner",
    "render_error",
    "render_human_readable",
    "validate_source",
    "write_machine_readable",
]
