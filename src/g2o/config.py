"""
Configuration using Pydantic settings.

Configuration is loaded from environment variables with the G2O_ prefix
(G2O_OLLAMA_ for backend settings), and can be overridden via a YAML file.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from g2o.errors import ConfigValidationError


class AppSettings(BaseSettings):
    """General application settings."""

    model_config = SettingsConfigDict(
        env_prefix="G2O_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    log_level: str = Field(default="INFO", description="Log level")

    # Config file path
    config_path: Path | None = Field(default=None, description="Path to YAML config file")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v


class OllamaSettings(BaseSettings):
    """Chat-completion backend settings."""

    model_config = SettingsConfigDict(
        env_prefix="G2O_OLLAMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    base_url: str = Field(
        default="http://localhost:11434/v1",
        description="OpenAI-compatible API base URL",
    )
    model: str = Field(default="llama3.2", description="Model used when a request names none")

    # None disables httpx timeouts; callers own timeout policy
    timeout: float | None = Field(default=None, description="Request timeout in seconds")


class Settings(BaseSettings):
    """Combined application settings."""

    app: AppSettings = Field(default_factory=AppSettings)
    ollama: OllamaSettings = Field(default_factory=OllamaSettings)

    def load_from_yaml(self, path: Path) -> None:
        """
        Load additional settings from a YAML file.

        Raises:
            ConfigValidationError: If the file has unknown sections or keys
        """
        if not path.exists():
            return

        with open(path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigValidationError(f"Invalid YAML in {path}: {e}") from e

        if not config:
            return

        if not isinstance(config, dict):
            raise ConfigValidationError(f"Config file {path} must contain a mapping")

        sections = {"app": self.app, "ollama": self.ollama}
        for section_name, values in config.items():
            section = sections.get(section_name)
            if section is None:
                raise ConfigValidationError(f"Unknown config section: {section_name}")
            for key, value in (values or {}).items():
                if key not in type(section).model_fields:
                    raise ConfigValidationError(f"Unknown key in {section_name}: {key}")
                try:
                    setattr(section, key, value)
                except ValidationError as e:
                    raise ConfigValidationError(f"Invalid value for {section_name}.{key}: {e}") from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()

    # Load from config file if specified
    if settings.app.config_path:
        settings.load_from_yaml(settings.app.config_path)

    return settings


def reset_settings() -> None:
    """Clear the cached settings (for testing)."""
    get_settings.cache_clear()


def get_settings_dict() -> dict[str, Any]:
    """Get settings as dictionary (for display)."""
    settings = get_settings()
    return {
        "app": {
            "log_level": settings.app.log_level,
            "config_path": str(settings.app.config_path) if settings.app.config_path else None,
        },
        "ollama": {
            "base_url": settings.ollama.base_url,
            "model": settings.ollama.model,
            "timeout": settings.ollama.timeout,
        },
    }
