"""Configuration management for the landing theme engine."""

import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "LANDING_THEME_CONFIG"
CSS_FORMATS = ("hex", "hsl")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EngineConfig:
    """Global configuration model for the theme engine."""

    # Theme defaults
    default_theme: str = "noir"

    # CSS output
    css_format: str = "hex"  # hex or hsl
    class_prefix: str = "site-theme"

    # Accessibility
    verify_contrast: bool = True  # raise if a derived pair misses AA

    # Diagnostics
    log_level: str = "WARNING"

    # File paths
    data_dir: str = "~/.landing_theme"

    def __post_init__(self):
        """Post-initialization validation."""
        self.data_dir = os.path.expanduser(self.data_dir)
        self.log_level = str(self.log_level).upper()

        if self.css_format not in CSS_FORMATS:
            raise ValueError(
                f"Invalid css_format '{self.css_format}' (expected one of {', '.join(CSS_FORMATS)})"
            )
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log_level '{self.log_level}'")

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        return yaml.safe_dump(asdict(self), default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "EngineConfig":
        """Deserialize config from YAML."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a YAML mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

        return cls(**{key: value for key, value in data.items() if key in known})

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return Path(self.data_dir) / "config.yaml"


def default_config_path() -> Path:
    """Config path from the environment, or the default data directory."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return EngineConfig().get_config_path()


class Config:
    """Configuration manager for the theme engine."""

    _instance: Optional[EngineConfig] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> EngineConfig:
        """Load configuration from file, falling back to defaults.

        Args:
            config_path: Optional explicit config file path

        Returns:
            EngineConfig instance

        Raises:
            ValueError: If the config file exists but is invalid
        """
        if config_path is None:
            config_path = default_config_path()

        if config_path.exists():
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    config = EngineConfig.from_yaml(f.read())
            except (yaml.YAMLError, TypeError) as e:
                raise ValueError(f"Invalid configuration in {config_path}: {e}") from e
            logger.debug(f"Loaded configuration from {config_path}")
        else:
            config = EngineConfig()
            logger.debug(f"No configuration at {config_path}; using defaults")

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: EngineConfig, config_path: Optional[Path] = None) -> Path:
        """Save configuration to file."""
        if config_path is None:
            config_path = config.get_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, 'w', encoding='utf-8') as f:
            f.write(config.to_yaml())

        logger.info(f"Configuration saved to {config_path}")
        return config_path

    @classmethod
    def get(cls) -> EngineConfig:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls, config_path: Optional[Path] = None) -> EngineConfig:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load(config_path)


def get_config() -> EngineConfig:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> EngineConfig:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: EngineConfig, config_path: Optional[Path] = None) -> Path:
    """Save configuration to file."""
    return Config.save(config, config_path)
