"""Reading key files from disk."""
from __future__ import annotations

import logging
from pathlib import Path

from keylib.schemas.errors import FormatException, KeyFileError


logger = logging.getLogger(__name__)


def read_key_file(path: str | Path, what: str = "key file") -> bytes:
    """
    Read the raw bytes of a key file.

    ``what`` names the file in the error message, e.g. "signature file".

    Raises:
        KeyFileError: The file is missing or unreadable.
    """
    path = Path(path)
    try:
        with path.open("rb") as f:
            data = f.read()
    except OSError as e:
        raise KeyFileError(
            f"Could not read {what} {path}: {e.strerror or e}",
            path=str(path),
        ) from e
    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def decode_key_text(data: bytes, path: str | Path | None = None) -> str:
    """
    Decode key file bytes as UTF-8 text.

    Raises:
        FormatException: The bytes are not UTF-8.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FormatException(
            "key file is not UTF-8 text",
            details={"path": str(path)} if path else None,
        ) from e


__all__ = ["read_key_file", "decode_key_text"]
