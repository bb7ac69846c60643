"""
Hashing Utilities

SHA-256 helpers and the hex codec used for key IDs and signatures.

Notes:
- Hex is lowercase and unprefixed everywhere in keylib (securesystemslib
  convention), unlike 0x-prefixed commitment hashes.
- Always hash raw bytes exactly as given; nothing is stripped or normalized.
"""
from __future__ import annotations

import hashlib
from typing import Any

from keylib.schemas.canonical import encode_canonical
from keylib.schemas.errors import FormatException


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def hash_canonical(obj: Any) -> bytes:
    """
    Hash an object using canonical JSON serialization.

    Rule: digest = sha256(encode_canonical(obj))

    Raises:
        CanonicalizationException: If the object cannot be canonicalized.
    """
    return sha256(encode_canonical(obj))


def to_hex(data: bytes) -> str:
    """Convert bytes to a lowercase hex string without prefix."""
    return data.hex()


def from_hex(hex_string: str, field: str | None = None) -> bytes:
    """
    Convert a hex string to bytes.

    Args:
        hex_string: Hex string without prefix.
        field: Name of the value for error reporting.

    Raises:
        FormatException: If the string has odd length or non-hex characters.

    Example:
        >>> from_hex("deadbeef").hex()
        'deadbeef'
    """
    if not isinstance(hex_string, str):
        raise FormatException(
            f"expected a hex string, got {type(hex_string).__name__}",
            field_path=field,
        )
    # bytes.fromhex tolerates whitespace, hex values in key dicts must not
    if any(c.isspace() for c in hex_string):
        raise FormatException("hex string contains whitespace", field_path=field)
    try:
        return bytes.fromhex(hex_string)
    except ValueError as e:
        raise FormatException(f"invalid hex string: {e}", field_path=field) from e


__all__ = [
    "sha256",
    "hash_canonical",
    "to_hex",
    "from_hex",
]
