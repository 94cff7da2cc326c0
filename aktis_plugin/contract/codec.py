"""Machine-readable (JSON) encoding of collection envelopes."""

import io
import json
from enum import Enum
from typing import IO, Any, Dict, Optional, Union

from pydantic import ValidationError

from ..errors import EnvelopeDecodeError
from .models import CollectionEnvelope, CollectorType, Item


class SchemaVariant(Enum):
    """Wire naming used for the envelope document."""

    COLLECTOR = "collector"    # payloads / collector / payload_count
    COLLECTION = "collection"  # metrics / plugin / metrics_count (legacy)


_ITEMS_KEY = {SchemaVariant.COLLECTOR: "payloads", SchemaVariant.COLLECTION: "metrics"}
_SOURCE_KEY = {SchemaVariant.COLLECTOR: "collector", SchemaVariant.COLLECTION: "plugin"}
_COUNT_KEY = {SchemaVariant.COLLECTOR: "payload_count", SchemaVariant.COLLECTION: "metrics_count"}


def _encode_item(item: Item, variant: SchemaVariant, source_name: str) -> Dict[str, Any]:
    raw = item.model_dump(mode="json")
    out = {"timestamp": raw["timestamp"]}
    if variant is SchemaVariant.COLLECTION:
        out["plugin_name"] = item.source_name or source_name
    elif item.source_name is not None:
        # Items relayed from another plugin keep their origin
        out["plugin_name"] = item.source_name
    out["type"] = raw["kind"]
    out["data"] = raw["data"]
    out["metadata"] = raw["metadata"]
    return out


def _encode_source(envelope: CollectionEnvelope, variant: SchemaVariant) -> Dict[str, Any]:
    source = envelope.source
    if variant is SchemaVariant.COLLECTOR:
        return {
            "name": source.name,
            "type": source.kind.value,
            "version": source.version,
            "environment": source.environment,
        }

    # Legacy plugin block drops empty optional fields; type only when not the default
    out: Dict[str, Any] = {"name": source.name}
    if source.kind is not CollectorType.DATA:
        out["type"] = source.kind.value
    if source.version:
        out["version"] = source.version
    if source.environment:
        out["environment"] = source.environment
    return out


def _encode_stats(envelope: CollectionEnvelope, variant: SchemaVariant) -> Dict[str, Any]:
    stats = envelope.stats
    out: Dict[str, Any] = {}
    if stats.duration:
        out["duration"] = stats.duration
    out[_COUNT_KEY[variant]] = stats.item_count
    if stats.error_count:
        out["error_count"] = stats.error_count
    return out


def envelope_to_dict(
    envelope: CollectionEnvelope,
    variant: SchemaVariant = SchemaVariant.COLLECTOR
) -> Dict[str, Any]:
    """
    Convert an envelope to its wire-shaped dictionary.

    ``error`` is omitted entirely on success, as are a zero ``error_count``
    and an empty ``duration``.
    """
    doc: Dict[str, Any] = {
        "success": envelope.success,
        "timestamp": envelope.model_dump(mode="json", include={"timestamp"})["timestamp"],
        _ITEMS_KEY[variant]: [
            _encode_item(item, variant, envelope.source.name) for item in envelope.items
        ],
    }
    if envelope.error is not None:
        doc["error"] = envelope.error
    doc[_SOURCE_KEY[variant]] = _encode_source(envelope, variant)
    doc["stats"] = _encode_stats(envelope, variant)
    return doc


def encode_machine_readable(
    envelope: CollectionEnvelope,
    variant: SchemaVariant = SchemaVariant.COLLECTOR
) -> bytes:
    """
    Serialize an envelope as a single compact JSON document.

    Args:
        envelope: Envelope to encode
        variant: Wire naming to use

    Returns:
        bytes: UTF-8 JSON, no trailing newline
    """
    doc = envelope_to_dict(envelope, variant)
    return json.dumps(doc, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def write_machine_readable(
    envelope: CollectionEnvelope,
    stream: IO,
    variant: SchemaVariant = SchemaVariant.COLLECTOR,
    binary: Optional[bool] = None
) -> None:
    """
    Write exactly one envelope document to a binary or text stream.

    Args:
        envelope: Envelope to encode
        stream: Destination (file, stdout, socket file object)
        variant: Wire naming to use
        binary: Force bytes (True) or str (False); by default text streams are
            recognised by being TextIOBase or having an encoding attribute
    """
    payload = encode_machine_readable(envelope, variant)
    if binary is None:
        binary = not (
            isinstance(stream, io.TextIOBase)
            or isinstance(getattr(stream, "encoding", None), str)
        )
    if not binary:
        stream.write(payload.decode("utf-8"))
    else:
        stream.write(payload)
    flush = getattr(stream, "flush", None)
    if flush is not None:
        flush()


def decode_machine_readable(document: Union[bytes, str]) -> CollectionEnvelope:
    """
    Parse a machine-readable document in either wire variant.

    Args:
        document: JSON document as produced by ``encode_machine_readable``

    Returns:
        CollectionEnvelope: Canonical envelope

    Raises:
        EnvelopeDecodeError: If the document is not valid JSON or breaks the contract
    """
    try:
        raw = json.loads(document)
    except (ValueError, UnicodeDecodeError) as e:
        raise EnvelopeDecodeError(f"Invalid JSON document: {e}") from e

    if not isinstance(raw, dict):
        raise EnvelopeDecodeError(
            f"Envelope must be a JSON object, got {type(raw).__name__}"
        )

    try:
        return CollectionEnvelope.model_validate(raw)
    except ValidationError as e:
        raise EnvelopeDecodeError(f"Envelope violates the output contract: {e}") from e
