"""Host-side running status of a plugin."""

from typing import Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from .models import CollectionEnvelope


class PluginStatus(BaseModel):
    """
    Running tally a host keeps for each plugin it invokes.

    Immutable: ``record`` returns a new status instead of updating in place.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    running: bool = False
    last_collection: Optional[AwareDatetime] = None
    item_count: int = Field(default=0, ge=0)
    error_count: int = Field(default=0, ge=0)
    message: str = ""

    @classmethod
    def initial(cls, name: str) -> "PluginStatus":
        return cls(name=name)

    def started(self) -> "PluginStatus":
        """Mark the plugin as currently executing."""
        return self.model_copy(update={"running": True})

    def record(self, envelope: CollectionEnvelope) -> "PluginStatus":
        """
        Fold one envelope into the tally.

        Args:
            envelope: Envelope parsed from the plugin's output

        Returns:
            PluginStatus: Updated status, not running
        """
        return self.model_copy(update={
            "running": False,
            "last_collection": envelope.timestamp,
            "item_count": self.item_count + envelope.stats.item_count,
            "error_count": self.error_count + envelope.stats.error_count,
            "message": "ok" if envelope.success else envelope.error,
        })
