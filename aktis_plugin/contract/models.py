"""Pydantic models for the plugin output contract."""

from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Dict, Mapping, Optional, Tuple

from pydantic import (
    AliasChoices,
    AfterValidator,
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    field_validator,
    model_validator,
)


def _read_only(value: Mapping) -> Mapping:
    return MappingProxyType(dict(value))


# Read-only after validation, plain dicts again when dumped
ReadOnlyData = Annotated[
    Mapping[str, Any],
    AfterValidator(_read_only),
    PlainSerializer(dict, return_type=Dict[str, Any]),
]
ReadOnlyTags = Annotated[
    Mapping[str, str],
    AfterValidator(_read_only),
    PlainSerializer(dict, return_type=Dict[str, str]),
]


class CollectorType(str, Enum):
    """How a collector produces items."""

    EVENT = "event"  # push/stream
    DATA = "data"    # polling/batch


class Item(BaseModel):
    """A single collected unit (a metric or payload)."""
    model_config = ConfigDict(frozen=True)

    timestamp: AwareDatetime
    source_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("source_name", "plugin_name"),
    )
    kind: str = Field(validation_alias=AliasChoices("kind", "type"), min_length=1)
    data: ReadOnlyData = Field(default_factory=dict, validate_default=True)
    metadata: ReadOnlyTags = Field(default_factory=dict, validate_default=True)

    @field_validator("data", "metadata", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return {} if v is None else v


class SourceInfo(BaseModel):
    """Describes the plugin that produced an envelope."""
    model_config = ConfigDict(frozen=True)

    name: str
    kind: CollectorType = Field(
        default=CollectorType.DATA,
        validation_alias=AliasChoices("kind", "type"),
    )
    version: str = "dev"
    environment: str = "development"


class RunStats(BaseModel):
    """Statistics for one collection run."""
    model_config = ConfigDict(frozen=True)

    duration: str = ""
    item_count: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("item_count", "payload_count", "metrics_count"),
    )
    error_count: int = Field(default=0, ge=0)


class CollectionEnvelope(BaseModel):
    """
    The single top-level output object of one plugin invocation.

    Built once through ``build_success_envelope`` or ``build_failure_envelope``
    and never mutated afterwards.
    """
    model_config = ConfigDict(frozen=True)

    success: bool
    timestamp: AwareDatetime
    items: Tuple[Item, ...] = Field(
        default_factory=tuple,
        validation_alias=AliasChoices("items", "payloads", "metrics"),
    )
    error: Optional[str] = None
    source: SourceInfo = Field(validation_alias=AliasChoices("source", "collector", "plugin"))
    stats: RunStats = Field(default_factory=RunStats)

    @field_validator("items", mode="before")
    @classmethod
    def null_items_as_empty(cls, v):
        return () if v is None else v

    @model_validator(mode="after")
    def check_consistency(self) -> "CollectionEnvelope":
        if self.success:
            if self.error is not None:
                raise ValueError("successful envelope must not carry an error")
            if self.stats.error_count != 0:
                raise ValueError("successful envelope must have error_count 0")
        else:
            if not self.error:
                raise ValueError("failed envelope requires a non-empty error")
            if self.items:
                raise ValueError("failed envelope must not carry items")
            if self.stats.error_count < 1:
                raise ValueError("failed envelope must have error_count >= 1")

        if self.stats.item_count != len(self.items):
            raise ValueError(
                f"item_count {self.stats.item_count} does not match "
                f"{len(self.items)} items"
            )
        return self
