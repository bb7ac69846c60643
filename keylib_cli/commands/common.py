"""
Helpers shared by CLI commands.
"""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path

from keylib.config import RuntimeConfig
from keylib.crypto.keyfile import read_key_file


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def resolve_key_type(args: Namespace, config: RuntimeConfig) -> str:
    """``--type`` if given, else the configured default keytype."""
    return getattr(args, "key_type", None) or config.keys.default_key_type


def wants_json(args: Namespace, config: RuntimeConfig) -> bool:
    return bool(getattr(args, "json", False)) or config.output.format == "json"


def read_payload(path: str | Path) -> bytes:
    """Read the bytes to sign or verify."""
    return read_key_file(path, what="data file")
