"""
Schemas & Canonicalization
File: __init__.py

Purpose: Export the public API for the schemas module.
"""

# Canonical serialization API
from .canonical import (
    canonical_equals,
    dumps_canonical,
    encode_canonical,
)

# Error models and exceptions
from .errors import (
    CanonicalizationException,
    ErrorCodes,
    FormatException,
    KeyFileError,
    KeylibError,
    KeylibException,
    KeyTypeException,
    MissingPrivateKeyException,
    ParseException,
    SignatureVerificationException,
)

# Key and signature entities
from .keys import (
    DEFAULT_KEYID_HASH_ALGORITHMS,
    ED25519_KEY_TYPE,
    ED25519_SCHEME,
    KEY_VARIANTS,
    RSA_KEY_TYPE,
    RSA_SCHEME,
    SCHEMES_BY_KEY_TYPE,
    AnyKey,
    Ed25519Key,
    Key,
    KeyVal,
    RSAKey,
    Signature,
    check_key_type,
    key_from_dict,
)

__all__ = [
    # Canonical
    "canonical_equals",
    "dumps_canonical",
    "encode_canonical",
    # Errors
    "CanonicalizationException",
    "ErrorCodes",
    "FormatException",
    "KeyFileError",
    "KeylibError",
    "KeylibException",
    "KeyTypeException",
    "MissingPrivateKeyException",
    "ParseException",
    "SignatureVerificationException",
    # Keys
    "DEFAULT_KEYID_HASH_ALGORITHMS",
    "ED25519_KEY_TYPE",
    "ED25519_SCHEME",
    "KEY_VARIANTS",
    "RSA_KEY_TYPE",
    "RSA_SCHEME",
    "SCHEMES_BY_KEY_TYPE",
    "AnyKey",
    "Ed25519Key",
    "Key",
    "KeyVal",
    "RSAKey",
    "Signature",
    "check_key_type",
    "key_from_dict",
]
