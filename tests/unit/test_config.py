"""
Tests for settings and YAML configuration loading.
"""

from pathlib import Path

import pytest

from g2o.config import Settings, get_settings, get_settings_dict, reset_settings
from g2o.errors import ConfigValidationError


class TestSettingsDefaults:
    """Tests for default settings."""

    def test_defaults(self):
        """Should point at a local Ollama server"""
        settings = Settings()
        assert settings.ollama.base_url == "http://localhost:11434/v1"
        assert settings.ollama.model == "llama3.2"
        assert settings.ollama.timeout is None
        assert settings.app.log_level == "INFO"

    def test_env_overrides(self, monkeypatch):
        """Should read G2O_ environment variables"""
        monkeypatch.setenv("G2O_OLLAMA_MODEL", "qwen2.5")
        monkeypatch.setenv("G2O_OLLAMA_TIMEOUT", "30")
        monkeypatch.setenv("G2O_LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.ollama.model == "qwen2.5"
        assert settings.ollama.timeout == 30.0
        assert settings.app.log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        """Should reject unknown log levels"""
        monkeypatch.setenv("G2O_LOG_LEVEL", "chatty")
        with pytest.raises(ValueError):
            Settings()

    def test_cached(self):
        """Should cache settings until reset"""
        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first


class TestLoadFromYaml:
    """Tests for YAML overrides."""

    def test_overrides(self, tmp_path: Path):
        """Should apply values from app and ollama sections"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("""
app:
  log_level: warning
ollama:
  base_url: http://gpu-box:11434/v1
  model: mistral
  timeout: 15
""")
        settings = Settings()
        settings.load_from_yaml(config_file)

        assert settings.app.log_level == "WARNING"
        assert settings.ollama.base_url == "http://gpu-box:11434/v1"
        assert settings.ollama.model == "mistral"
        assert settings.ollama.timeout == 15.0

    def test_missing_file(self, tmp_path: Path):
        """Should ignore a missing file"""
        settings = Settings()
        settings.load_from_yaml(tmp_path / "absent.yaml")
        assert settings.ollama.model == "llama3.2"

    def test_empty_file(self, tmp_path: Path):
        """Should ignore an empty file"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        settings = Settings()
        settings.load_from_yaml(config_file)
        assert settings.ollama.model == "llama3.2"

    def test_unknown_section(self, tmp_path: Path):
        """Should reject unknown sections"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("server:\n  port: 8080\n")
        with pytest.raises(ConfigValidationError, match="server"):
            Settings().load_from_yaml(config_file)

    def test_unknown_key(self, tmp_path: Path):
        """Should reject unknown keys"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("ollama:\n  api_key: secret\n")
        with pytest.raises(ConfigValidationError, match="api_key"):
            Settings().load_from_yaml(config_file)

    def test_invalid_value(self, tmp_path: Path):
        """Should reject values that fail validation"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("app:\n  log_level: chatty\n")
        with pytest.raises(ConfigValidationError, match="log_level"):
            Settings().load_from_yaml(config_file)

    def test_invalid_yaml(self, tmp_path: Path):
        """Should reject unparsable YAML"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("ollama: [unclosed\n")
        with pytest.raises(ConfigValidationError):
            Settings().load_from_yaml(config_file)

    def test_config_path_env(self, tmp_path: Path, monkeypatch):
        """Should load the file named by G2O_CONFIG_PATH"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("ollama:\n  model: phi3\n")
        monkeypatch.setenv("G2O_CONFIG_PATH", str(config_file))

        assert get_settings().ollama.model == "phi3"
        assert get_settings_dict()["app"]["config_path"] == str(config_file)
