"""Error taxonomy for plugins and hosts."""


class PluginError(Exception):
    """Base class for all plugin SDK errors."""


class CollectionFailure(PluginError):
    """The plugin-specific gathering step failed."""

    def __init__(self, cause: str):
        super().__init__(cause)
        self.cause = cause


class ConfigurationError(PluginError):
    """Invalid source description or plugin configuration."""


class EnvelopeDecodeError(PluginError):
    """A machine-readable document could not be parsed as an envelope."""
