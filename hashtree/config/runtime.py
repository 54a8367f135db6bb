"""
Runtime Configuration

Central configuration for rendering defaults and logging.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from hashtree.schemas.errors import ConfigurationException

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "HASHTREE_"

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class RenderConfig:
    """Configuration for ASCII rendering."""
    node_width: int = 4


@dataclass
class LoggingConfig:
    """Configuration for library logging (applied by setup_logging)."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class HashTreeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - HASHTREE_NODE_WIDTH: Default node width for rendering
        - HASHTREE_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR)
        - HASHTREE_LOG_FILE: Optional log file path
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}NODE_WIDTH"):
            overrides.setdefault("render", {})["node_width"] = os.getenv(f"{ENV_PREFIX}NODE_WIDTH")

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides.setdefault("logging", {})["log_file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "HashTreeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "HashTreeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationException(
                f"Config file must contain a mapping, got {type(data).__name__}",
                details={"path": str(path)},
            )
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HashTreeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        render_data = data.get("render") or {}
        logging_data = data.get("logging") or {}

        render = RenderConfig()
        if "node_width" in render_data:
            render.node_width = _parse_int(render_data["node_width"], "render.node_width")

        log_config = LoggingConfig()
        if "level" in logging_data:
            log_config.level = str(logging_data["level"]).upper()
        if "log_file" in logging_data:
            log_config.log_file = logging_data["log_file"]
        if "format" in logging_data:
            log_config.format = str(logging_data["format"])

        return cls(
            render=render,
            logging=log_config,
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "HashTreeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        if "render" in overrides:
            new_config.render.node_width = _parse_int(
                overrides["render"]["node_width"], "render.node_width"
            )

        if "logging" in overrides:
            for key, value in overrides["logging"].items():
                if key == "level":
                    value = value.upper()
                setattr(new_config.logging, key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "render": {
                "node_width": self.render.node_width,
            },
            "logging": {
                "level": self.logging.level,
                "log_file": self.logging.log_file,
                "format": self.logging.format,
            },
            "extra": self.extra,
        }


def _parse_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationException(f"{key} must be an integer, got {value!r}", key=key)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationException(f"{key} must be an integer, got {value!r}", key=key) from e


# Global default configuration
_default_config: Optional[HashTreeConfig] = None


def get_default_config() -> HashTreeConfig:
    """Get the default runtime configuration (loaded from env on first use)."""
    global _default_config
    if _default_config is None:
        _default_config = HashTreeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[HashTreeConfig]) -> None:
    """Replace the default configuration; None resets it to load from env again."""
    global _default_config
    _default_config = config
