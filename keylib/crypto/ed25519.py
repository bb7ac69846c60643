"""
Ed25519 Keys and Signatures

Ed25519 keys are stored as JSON key objects (in-toto-keygen format):

    {
        "keytype": "ed25519",
        "scheme": "ed25519",
        "keyid": "...",                      # optional, derived when empty
        "keyid_hash_algorithms": ["sha256", "sha512"],  # kept as given, may be absent
        "keyval": {
            "public": "<64 hex chars>",
            "private": "<64 hex chars>"      # private key files only
        }
    }

``keyval.private`` is the 32-byte seed. Signatures are computed over the raw
signable bytes, without pre-hashing.

Encrypted private key files are not supported and fail validation.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from keylib.crypto.hashing import from_hex, to_hex
from keylib.crypto.keyfile import read_key_file
from keylib.schemas.errors import FormatException, SignatureVerificationException
from keylib.schemas.keys import (
    ED25519_KEY_TYPE,
    Ed25519Key,
    Key,
    Signature,
    check_key_type,
    key_from_dict,
)


logger = logging.getLogger(__name__)


# 64 hex digits => 32 bytes
ED25519_HEX_LENGTH = 64
ED25519_SEED_SIZE = 32
ED25519_PUBLIC_KEY_SIZE = 32
ED25519_SIGNATURE_SIZE = 64


# =============================================================================
# Validation
# =============================================================================

def _load_key_json(text: str | bytes) -> dict[str, Any]:
    try:
        data = json.loads(text)
    except ValueError as e:
        raise FormatException("this is not a valid JSON key object") from e
    if not isinstance(data, dict):
        raise FormatException("this is not a valid JSON key object")
    return data


def _validate_key(key: Key) -> None:
    """Checks shared by public and private key objects."""
    from_hex(key.key_id, field="keyid")

    if not key.key_val.public:
        raise FormatException(
            f"in key '{key.key_id}': public key cannot be empty",
            field_path="keyval.public",
        )
    from_hex(key.key_val.public, field="keyval.public")

    if key.key_val.private:
        from_hex(key.key_val.private, field="keyval.private")


def _validate_public_key(key: Key) -> None:
    _validate_key(key)
    if key.key_val.private:
        raise FormatException(
            f"in key '{key.key_id}': private key found",
            field_path="keyval.private",
        )


def _validate_private_key(key: Key) -> None:
    _validate_key(key)
    if not key.key_val.private:
        raise FormatException(
            f"in key '{key.key_id}': private key cannot be empty",
            field_path="keyval.private",
        )


def _parse_ed25519_json(text: str | bytes) -> Ed25519Key:
    key = key_from_dict(_load_key_json(text), expected=ED25519_KEY_TYPE)
    if not key.key_id:
        key.generate_key_id()
    return key


# =============================================================================
# Parsing and loading
# =============================================================================

def parse_ed25519_private(text: str | bytes) -> Ed25519Key:
    """
    Parse an ed25519 private key object.

    Raises:
        FormatException: Invalid JSON, malformed fields, or a private value
            that is not 64 hex characters.
        KeyTypeException: ``keytype`` or ``scheme`` is not "ed25519".
    """
    key = _parse_ed25519_json(text)
    _validate_private_key(key)

    if len(key.key_val.private or "") != ED25519_HEX_LENGTH:
        raise FormatException(
            "the private field on this key is malformed",
            field_path="keyval.private",
        )
    return key


def parse_ed25519_public(text: str | bytes) -> Ed25519Key:
    """
    Parse an ed25519 public key object.

    Raises:
        FormatException: Invalid JSON, malformed fields, a private value
            present, or a public value that is not 64 hex characters.
        KeyTypeException: ``keytype`` or ``scheme`` is not "ed25519".
    """
    key = _parse_ed25519_json(text)
    _validate_public_key(key)

    if len(key.key_val.public) != ED25519_HEX_LENGTH:
        raise FormatException(
            "the public field on this key is malformed",
            field_path="keyval.public",
        )
    return key


def load_ed25519_public_key(path: str | Path) -> Ed25519Key:
    """Load an ed25519 public key file. See :func:`parse_ed25519_public`."""
    key = parse_ed25519_public(read_key_file(path))
    logger.debug("Loaded ed25519 public key %s from %s", key.key_id, path)
    return key


def load_ed25519_private_key(path: str | Path) -> Ed25519Key:
    """Load an ed25519 private key file. See :func:`parse_ed25519_private`."""
    key = parse_ed25519_private(read_key_file(path))
    logger.debug("Loaded ed25519 private key %s from %s", key.key_id, path)
    return key


def ed25519_public_hex_from_seed(seed_hex: str) -> str:
    """
    Derive the hex public key for a hex-encoded 32-byte seed.

    Raises:
        FormatException: The seed is not 32 bytes of hex.
    """
    private_key = _private_key_from_seed(seed_hex)
    public_bytes = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    return to_hex(public_bytes)


# =============================================================================
# Signatures
# =============================================================================

def _private_key_from_seed(seed_hex: str) -> Ed25519PrivateKey:
    seed = from_hex(seed_hex, field="keyval.private")
    if len(seed) != ED25519_SEED_SIZE:
        raise FormatException(
            f"ed25519 seed must be {ED25519_SEED_SIZE} bytes, got {len(seed)}",
            field_path="keyval.private",
        )
    return Ed25519PrivateKey.from_private_bytes(seed)


def generate_ed25519_signature(signable: bytes, key: Key) -> Signature:
    """
    Sign ``signable`` with the key's ed25519 seed.

    Raises:
        KeyTypeException: The key is not an ed25519 key.
        MissingPrivateKeyException: The key has no private half.
        FormatException: The seed is not 32 bytes of hex.
    """
    check_key_type({"keytype": key.key_type, "scheme": key.scheme}, expected=ED25519_KEY_TYPE)
    private_key = _private_key_from_seed(key.require_private())
    signature = private_key.sign(signable)
    return Signature(key_id=key.key_id, sig=to_hex(signature))


def verify_ed25519_signature(key: Key, signature: Signature, data: bytes) -> None:
    """
    Verify an ed25519 signature over ``data``.

    Raises:
        FormatException: Public key or signature is not valid hex, or the
            public key is not 32 bytes.
        SignatureVerificationException: The signature does not verify.
    """
    public_bytes = from_hex(key.key_val.public, field="keyval.public")
    sig_bytes = from_hex(signature.sig, field="sig")

    if len(public_bytes) != ED25519_PUBLIC_KEY_SIZE:
        raise FormatException(
            f"ed25519 public key must be {ED25519_PUBLIC_KEY_SIZE} bytes, got {len(public_bytes)}",
            field_path="keyval.public",
        )
    try:
        public_key = Ed25519PublicKey.from_public_bytes(public_bytes)
    except ValueError as e:
        raise FormatException(
            f"invalid ed25519 public key: {e}",
            field_path="keyval.public",
        ) from e

    if len(sig_bytes) != ED25519_SIGNATURE_SIZE:
        raise SignatureVerificationException(
            "invalid ed25519 signature",
            key_id=key.key_id,
            details={"length": len(sig_bytes)},
        )
    try:
        public_key.verify(sig_bytes, data)
    except InvalidSignature as e:
        raise SignatureVerificationException(
            "invalid ed25519 signature",
            key_id=key.key_id,
        ) from e


__all__ = [
    "ED25519_HEX_LENGTH",
    "parse_ed25519_private",
    "parse_ed25519_public",
    "load_ed25519_public_key",
    "load_ed25519_private_key",
    "ed25519_public_hex_from_seed",
    "generate_ed25519_signature",
    "verify_ed25519_signature",
]
