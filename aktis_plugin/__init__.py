"""Aktis plugin SDK: the output contract collector plugins report through."""

from .contract import (
    CollectionEnvelope,
    CollectorType,
    Item,
    PluginStatus,
    RunStats,
    SchemaVariant,
    SourceInfo,
    build_failure_envelope,
    build_success_envelope,
    decode_machine_readable,
    encode_machine_readable,
    new_item,
    render_human_readable,
    write_machine_readable,
)
from .errors import CollectionFailure, ConfigurationError, EnvelopeDecodeError, PluginError
from .utils.environment import classify_environment
from .version import BuildInfo, VersionInfo, get_build_info

__all__ = [
    "BuildInfo",
    "CollectionEnvelope",
    "CollectionFailure",
    "CollectorType",
    "ConfigurationError",
    "EnvelopeDecodeError",
    "Item",
    "PluginError",
    "PluginStatus",
    "RunStats",
    "SchemaVariant",
    "SourceInfo",
    "VersionInfo",
    "build_failure_envelope",
    "build_success_envelope",
    "classify_environment",
    "decode_machine_readable",
    "encode_machine_readable",
    "get_build_info",
    "new_item",
    "render_human_readable",
    "write_machine_readable",
]
