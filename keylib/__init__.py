"""
keylib - key identity, key loading and signatures for in-toto style
attestations, interoperable with securesystemslib key dicts.

Usage:
    from keylib import load_rsa_private_key, generate_signature, verify_signature

    key = load_rsa_private_key("alice")
    sig = generate_signature(payload, key)
    verify_signature(key.public_only(), sig, payload)
"""

from keylib.crypto import (
    derive_key_id,
    generate_ed25519_signature,
    generate_key_id,
    generate_rsa_signature,
    generate_signature,
    load_ed25519_private_key,
    load_ed25519_public_key,
    load_key,
    load_rsa_private_key,
    load_rsa_public_key,
    parse_ed25519_private,
    parse_ed25519_public,
    verify_ed25519_signature,
    verify_rsa_signature,
    verify_signature,
)
from keylib.schemas import (
    CanonicalizationException,
    Ed25519Key,
    FormatException,
    Key,
    KeyFileError,
    KeylibException,
    KeyTypeException,
    KeyVal,
    MissingPrivateKeyException,
    ParseException,
    RSAKey,
    Signature,
    SignatureVerificationException,
    encode_canonical,
)

__version__ = "0.1.0"

__all__ = [
    "derive_key_id",
    "generate_ed25519_signature",
    "generate_key_id",
    "generate_rsa_signature",
    "generate_signature",
    "load_ed25519_private_key",
    "load_ed25519_public_key",
    "load_key",
    "load_rsa_private_key",
    "load_rsa_public_key",
    "parse_ed25519_private",
    "parse_ed25519_public",
    "verify_ed25519_signature",
    "verify_rsa_signature",
    "verify_signature",
    "CanonicalizationException",
    "Ed25519Key",
    "FormatException",
    "Key",
    "KeyFileError",
    "KeylibException",
    "KeyTypeException",
    "KeyVal",
    "MissingPrivateKeyException",
    "ParseException",
    "RSAKey",
    "Signature",
    "SignatureVerificationException",
    "encode_canonical",
]
