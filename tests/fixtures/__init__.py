"""
Test fixtures package for keylib tests.

This package provides factory functions and constants for key material:
- keys.py: sample ed25519 key, ed25519 key objects, RSA PEM material

Usage:
    from fixtures import make_ed25519_public_json, rsa_private_pem

    def test_something(tmp_path):
        path = write_key_file(tmp_path, "alice", rsa_private_pem())
"""

from .keys import (
    SAMPLE_ED25519_HELLO_SIG,
    SAMPLE_ED25519_KEYID,
    SAMPLE_ED25519_PRIVATE,
    SAMPLE_ED25519_PUBLIC,
    ec_public_pem,
    make_ed25519_key_dict,
    make_ed25519_private_json,
    make_ed25519_public_json,
    make_rsa_private_key,
    rsa_encrypted_private_pem,
    rsa_pkcs8_private_pem,
    rsa_private_pem,
    rsa_public_pem,
    write_key_file,
)

__all__ = [
    "SAMPLE_ED25519_HELLO_SIG",
    "SAMPLE_ED25519_KEYID",
    "SAMPLE_ED25519_PRIVATE",
    "SAMPLE_ED25519_PUBLIC",
    "ec_public_pem",
    "make_ed25519_key_dict",
    "make_ed25519_private_json",
    "make_ed25519_public_json",
    "make_rsa_private_key",
    "rsa_encrypted_private_pem",
    "rsa_pkcs8_private_pem",
    "rsa_private_pem",
    "rsa_public_pem",
    "write_key_file",
]
