from .loader import ConfigLoader
from .models import PluginConfig
from .settings import Settings

__all__ = ["ConfigLoader", "PluginConfig", "Settings"]
