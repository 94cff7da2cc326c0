"""Configuration loader with YAML parsing and environment variable substitution."""

import os
import re
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from ..errors import ConfigurationError
from .models import PluginConfig


class ConfigLoader:
    """Load and validate plugin configuration."""

    @staticmethod
    def load(config_path: Optional[str] = None) -> PluginConfig:
        """
        Load configuration, falling back to defaults when no path is given.

        Args:
            config_path: Optional path to YAML configuration file

        Returns:
            PluginConfig: Validated configuration object
        """
        if not config_path:
            return PluginConfig()
        return ConfigLoader.load_from_file(config_path)

    @staticmethod
    def load_from_file(config_path: str) -> PluginConfig:
        """
        Load configuration from YAML file with environment variable substitution.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            PluginConfig: Validated configuration object

        Raises:
            ConfigurationError: If the file is missing, unparsable or invalid
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file, 'r') as f:
                raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

        # An empty file means "all defaults"
        if raw_config is None:
            raw_config = {}
        if not isinstance(raw_config, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping: {config_path}"
            )

        raw_config = ConfigLoader._substitute_env_vars(raw_config)

        try:
            return PluginConfig(**raw_config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e

    @staticmethod
    def _substitute_env_vars(obj: Any) -> Any:
        """
        Recursively substitute ${ENV_VAR} placeholders with environment values.

        Args:
            obj: Object to process (str, dict, list, or primitive)

        Returns:
            Object with environment variables substituted
        """
        if isinstance(obj, str):
            pattern = r'\$\{(\w+)\}'
            return re.sub(pattern, lambda m: os.getenv(m.group(1), ''), obj)

        elif isinstance(obj, dict):
            return {k: ConfigLoader._substitute_env_vars(v) for k, v in obj.items()}

        elif isinstance(obj, list):
            return [ConfigLoader._substitute_env_vars(item) for item in obj]

        return obj
