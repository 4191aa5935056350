"""Configuration management for taskpad."""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .exceptions import ConfigError
from .fileformat import DEFAULT_FILE_NAME

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "taskpad.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ConfigModel:
    """Configuration model for taskpad."""

    # Task file, relative to the working directory unless absolute
    data_file: str = DEFAULT_FILE_NAME

    log_level: str = "WARNING"
    no_color: bool = False

    def __post_init__(self):
        if not isinstance(self.data_file, str) or not self.data_file:
            raise ConfigError("data_file must be a non-empty path")
        if not isinstance(self.no_color, bool):
            raise ConfigError("no_color must be true or false")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level '{self.log_level}'")

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "data_file": self.data_file,
            "log_level": self.log_level,
            "no_color": self.no_color,
        }
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys."""
        try:
            data = yaml.safe_load(yaml_str)
        except (yaml.YAMLError, ValueError, RecursionError) as e:
            raise ConfigError(f"Invalid YAML: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("Config must contain a mapping at the top level")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.debug(f"Ignoring unknown config keys: {', '.join(unknown)}")

        return cls(**{key: value for key, value in data.items() if key in known})

    def get_data_path(self) -> Path:
        """Get the task file path."""
        return Path(self.data_file).expanduser()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file, falling back to defaults.

    With no path, ``taskpad.yaml`` in the working directory is used if it
    exists.
    """
    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_FILE)
        if not config_path.exists():
            return ConfigModel()

    config_path = Path(config_path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = ConfigModel.from_yaml(f.read())
    except (OSError, ConfigError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
        return ConfigModel()

    logger.debug(f"Loaded configuration from {config_path}")
    return config


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    config_path = Path(config_path or DEFAULT_CONFIG_FILE)
    with open(config_path, "w", encoding="utf-8") as f:
        f.write(config.to_yaml())
    logger.info(f"Configuration saved to {config_path}")
