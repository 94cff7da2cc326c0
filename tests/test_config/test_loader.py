"""Tests for ConfigLoader and PluginConfig."""

import pytest

from aktis_plugin.config.loader import ConfigLoader
from aktis_plugin.config.models import PluginConfig
from aktis_plugin.config.settings import Settings
from aktis_plugin.errors import ConfigurationError


@pytest.fixture
def write_config(tmp_path):
    def _write(text):
        path = tmp_path / "config.yaml"
        path.write_text(text)
        return str(path)
    return _write


class TestConfigLoader:
    """Test suite for ConfigLoader."""

    def test_no_path_gives_defaults(self):
        config = ConfigLoader.load("")

        assert config == PluginConfig()
        assert config.enabled is True
        assert config.sample_rate == 1000
        assert config.include_system is True

    def test_load_values(self, write_config):
        config = ConfigLoader.load(write_config("enabled: false\nsample_rate: 250\n"))

        assert config.enabled is False
        assert config.sample_rate == 250
        assert config.include_system is True

    def test_unknown_keys_kept(self, write_config):
        config = ConfigLoader.load_from_file(write_config("endpoint: http://localhost\n"))
        assert config.model_extra == {"endpoint": "http://localhost"}

    def test_env_substitution(self, write_config, monkeypatch):
        monkeypatch.setenv("EXAMPLE_RATE", "500")
        config = ConfigLoader.load_from_file(write_config("sample_rate: ${EXAMPLE_RATE}\n"))

        assert config.sample_rate == 500

    def test_empty_file_gives_defaults(self, write_config):
        assert ConfigLoader.load_from_file(write_config("")) == PluginConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigLoader.load_from_file(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, write_config):
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            ConfigLoader.load_from_file(write_config("enabled: [unclosed\n"))

    def test_non_mapping_root(self, write_config):
        with pytest.raises(ConfigurationError, match="mapping"):
            ConfigLoader.load_from_file(write_config("- a\n- b\n"))

    def test_invalid_value(self, write_config):
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            ConfigLoader.load_from_file(write_config("sample_rate: 0\n"))


class TestSettings:
    """Test suite for Settings."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert Settings().LOG_LEVEL == "WARNING"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().LOG_LEVEL == "DEBUG"

    def test_required_missing(self, monkeypatch):
        monkeypatch.delenv("AKTIS_MISSING", raising=False)
        with pytest.raises(ValueError, match="AKTIS_MISSING"):
            Settings.get("AKTIS_MISSING", required=True)
