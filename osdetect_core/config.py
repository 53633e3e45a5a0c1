"""Configuration management for os-detector."""
import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "OSDETECT_CONFIG"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class DetectorConfig(BaseModel):
    """Global os-detector configuration."""

    fail_on_unknown_os: bool = Field(default=True, description="Fail when os.name is not recognized")
    mirror_system_properties: bool = Field(
        default=False, description="Write name, arch and bitness back into the live property store"
    )
    append_release_to_classifier: bool = Field(
        default=False, description="Append the detected Linux release id to the classifier"
    )
    classifier_with_likes: List[str] = Field(
        default_factory=list, description="Qualifiers appended to the classifier"
    )
    log_level: str = Field(default="WARNING", description="Logging level for the command line")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value


def default_config_path() -> Path:
    """Return the config file location, honouring OSDETECT_CONFIG."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".osdetect" / "config.json"


class ConfigManager:
    """Manages loading and saving of configuration."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize the config manager.

        Args:
            config_path: Path to the config file. If None, uses default location.
        """
        self.config_path = config_path or default_config_path()
        self._config: Optional[DetectorConfig] = None

    @property
    def config(self) -> DetectorConfig:
        """Get the current configuration (lazy loading)."""
        if self._config is None:
            self._load()
        return self._config  # type: ignore

    def _load(self) -> None:
        """Load config from file."""
        if not self.config_path.exists():
            logger.debug("No config file found, using defaults")
            self._config = DetectorConfig()
            return

        try:
            with open(self.config_path, "r") as f:
                data = json.load(f)
            self._config = DetectorConfig(**data)
            logger.debug(f"Configuration loaded from {self.config_path}")
        except (json.JSONDecodeError, TypeError, ValidationError) as e:
            logger.warning(f"Invalid config file, using defaults: {e}")
            self._config = DetectorConfig()
        except OSError as e:
            raise ConfigError(str(self.config_path), str(e)) from e

    def save(self) -> None:
        """Save config to file."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w") as f:
                f.write(self.config.model_dump_json(indent=2))
        except OSError as e:
            raise ConfigError(str(self.config_path), str(e)) from e
        logger.debug(f"Configuration saved to {self.config_path}")

    def get(self) -> DetectorConfig:
        """Get the current configuration."""
        return self.config

    def update(self, **kwargs) -> None:
        """Update configuration values.

        Args:
            **kwargs: Configuration values to update.

        Raises:
            ConfigError: If a value does not validate.
        """
        current = self.config.model_dump()
        current.update(kwargs)
        try:
            self._config = DetectorConfig(**current)
        except ValidationError as e:
            raise ConfigError(str(self.config_path), str(e)) from e

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._config = DetectorConfig()


# Lazy singleton pattern
_config_instance: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the global config manager instance (lazy initialization)."""
    global _config_instance
    if _config_instance is None:
        _config_instance = ConfigManager()
    return _config_instance


def get_config() -> DetectorConfig:
    """Get the current configuration."""
    return get_config_manager().config


def reset_config() -> None:
    """Reset the global config instance. Useful for testing."""
    global _config_instance
    _config_instance = None
