"""
CLI Configuration

Resolves the runtime configuration for the keylib CLI from a config file
and environment variables.
"""

from __future__ import annotations

from pathlib import Path

from keylib.config import RuntimeConfig


def default_config_paths() -> list[Path]:
    """Config files searched when no ``--config`` is given, in order."""
    return [
        Path.cwd() / "keylib.yaml",
        Path.cwd() / ".keylib.yaml",
        Path.home() / ".config" / "keylib" / "config.yaml",
    ]


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to a YAML config file. Must exist if given.

    Returns:
        Merged configuration
    """
    config = RuntimeConfig()

    if config_path is not None:
        config = RuntimeConfig.from_yaml(config_path)
    else:
        for default_path in default_config_paths():
            if default_path.exists():
                config = RuntimeConfig.from_yaml(default_path)
                break

    return config.with_env_overrides()
