"""
Runtime Configuration

Central configuration for logging, key lookup and output formatting.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from keylib.schemas.keys import ED25519_KEY_TYPE, KEY_VARIANTS

load_dotenv()


ENV_PREFIX = "KEYLIB_"

OUTPUT_FORMATS = ("human", "json")


@dataclass
class LoggingConfig:
    """Configuration for log output."""
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class KeysConfig:
    """Configuration for key lookup."""
    default_key_type: str = ED25519_KEY_TYPE
    key_dir: Optional[str] = None

    def __post_init__(self):
        if self.default_key_type not in KEY_VARIANTS:
            raise ValueError(
                f"Unsupported default_key_type {self.default_key_type!r}, "
                f"expected one of {sorted(KEY_VARIANTS)}"
            )

    def resolve(self, path: str | Path) -> Path:
        """Resolve a relative key path against ``key_dir`` if one is set."""
        path = Path(path)
        if self.key_dir and not path.is_absolute():
            return Path(self.key_dir) / path
        return path


@dataclass
class OutputConfig:
    """Configuration for CLI output."""
    format: str = "human"
    indent: int = 2

    def __post_init__(self):
        if self.format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported output format {self.format!r}, expected one of {OUTPUT_FORMATS}"
            )


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration for keylib.

    Can be loaded from:
    - Environment variables (and a ``.env`` file)
    - YAML file
    - Programmatic construction
    """
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    keys: KeysConfig = field(default_factory=KeysConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        This is the SINGLE source of truth for all env var reading.

        Supported variables:
        - KEYLIB_LOG_LEVEL: Log level name
        - KEYLIB_LOG_FILE: Also log to this file
        - KEYLIB_KEY_TYPE: Default keytype (rsa or ed25519)
        - KEYLIB_KEY_DIR: Directory for relative key paths
        - KEYLIB_OUTPUT_FORMAT: human or json
        """
        overrides: dict[str, Any] = {}

        # Logging
        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        # Keys
        if os.getenv(f"{ENV_PREFIX}KEY_TYPE"):
            overrides.setdefault("keys", {})["default_key_type"] = (
                os.getenv(f"{ENV_PREFIX}KEY_TYPE", "").lower()
            )
        if os.getenv(f"{ENV_PREFIX}KEY_DIR"):
            overrides.setdefault("keys", {})["key_dir"] = os.getenv(f"{ENV_PREFIX}KEY_DIR")

        # Output
        if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
            overrides.setdefault("output", {})["format"] = (
                os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT", "").lower()
            )

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        logging_data = data.get("logging", {}) or {}
        keys_data = data.get("keys", {}) or {}
        output_data = data.get("output", {}) or {}

        return cls(
            logging=LoggingConfig(**logging_data),
            keys=KeysConfig(**keys_data),
            output=OutputConfig(**output_data),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        for section in ("logging", "keys", "output"):
            for key, value in overrides.get(section, {}).items():
                setattr(getattr(new_config, section), key, value)
        # re-run section validation
        new_config.keys.__post_init__()
        new_config.output.__post_init__()
        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
            "keys": {
                "default_key_type": self.keys.default_key_type,
                "key_dir": self.keys.key_dir,
            },
            "output": {
                "format": self.output.format,
                "indent": self.output.indent,
            },
        }


def get_default_config_template() -> str:
    """Get a template YAML configuration file."""
    return """\
logging:
  level: INFO
  file: null

keys:
  default_key_type: ed25519
  key_dir: null

output:
  format: human
  indent: 2
"""
