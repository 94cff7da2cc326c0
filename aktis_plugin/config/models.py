"""Pydantic configuration models for plugins."""

from pydantic import BaseModel, ConfigDict, Field


class PluginConfig(BaseModel):
    """
    Example plugin configuration.

    Unknown keys are kept so plugins can carry their own settings through
    the same file.
    """
    model_config = ConfigDict(extra="allow")

    enabled: bool = True
    sample_rate: int = Field(default=1000, ge=1)  # Milliseconds between samples
    include_system: bool = True
