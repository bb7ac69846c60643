"""
Core cryptographic utilities.

Hashing and key IDs, RSA and Ed25519 key codecs, and signature
generation/verification compatible with securesystemslib key dicts.
"""
from .hashing import (
    sha256,
    hash_canonical,
    to_hex,
    from_hex,
)
from .keyid import (
    keyid_payload,
    derive_key_id,
    generate_key_id,
)
from .rsa import (
    parse_rsa_public_pem,
    parse_rsa_private_pem,
    load_rsa_public_key,
    load_rsa_private_key,
    generate_rsa_signature,
    verify_rsa_signature,
)
from .ed25519 import (
    parse_ed25519_private,
    parse_ed25519_public,
    load_ed25519_public_key,
    load_ed25519_private_key,
    ed25519_public_hex_from_seed,
    generate_ed25519_signature,
    verify_ed25519_signature,
)
from .signatures import (
    generate_signature,
    verify_signature,
    load_key,
)

__all__ = [
    "sha256",
    "hash_canonical",
    "to_hex",
    "from_hex",
    "keyid_payload",
    "derive_key_id",
    "generate_key_id",
    "parse_rsa_public_pem",
    "parse_rsa_private_pem",
    "load_rsa_public_key",
    "load_rsa_private_key",
    "generate_rsa_signature",
    "verify_rsa_signature",
    "parse_ed25519_private",
    "parse_ed25519_public",
    "load_ed25519_public_key",
    "load_ed25519_private_key",
    "ed25519_public_hex_from_seed",
    "generate_ed25519_signature",
    "verify_ed25519_signature",
    "generate_signature",
    "verify_signature",
    "load_key",
]
