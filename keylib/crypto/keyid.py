"""
Key Identity

The key ID is the SHA-256 of the canonical encoding of exactly four fields:

    {"keytype": ..., "scheme": ..., "keyid_hash_algorithms": [...],
     "keyval": {"public": ...}}

A missing ``keyid_hash_algorithms`` is hashed as null, not defaulted.
``keyid`` and ``keyval.private`` never take part, so a key has the same ID
whether or not its private half is attached. This matches securesystemslib
and the other in-toto implementations byte for byte.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from keylib.crypto.hashing import hash_canonical, to_hex

if TYPE_CHECKING:
    from keylib.schemas.keys import Key


logger = logging.getLogger(__name__)


def keyid_payload(key: "Key") -> dict[str, Any]:
    """Build the mapping whose canonical encoding is hashed into the key ID."""
    return {
        "keytype": key.key_type,
        "scheme": key.scheme,
        "keyid_hash_algorithms": (
            list(key.key_id_hash_algorithms)
            if key.key_id_hash_algorithms is not None
            else None
        ),
        "keyval": {
            "public": key.key_val.public,
        },
    }


def derive_key_id(key: "Key") -> str:
    """
    Compute the key ID of ``key`` without modifying it.

    Returns:
        64 lowercase hex characters.

    Raises:
        CanonicalizationException: If the payload cannot be canonicalized.
    """
    return to_hex(hash_canonical(keyid_payload(key)))


def generate_key_id(key: "Key") -> str:
    """Derive the key ID and store it on ``key``."""
    key.key_id = derive_key_id(key)
    logger.debug("Derived keyid %s for %s key", key.key_id, key.key_type)
    return key.key_id


__all__ = [
    "keyid_payload",
    "derive_key_id",
    "generate_key_id",
]
