"""
RSA Keys and RSASSA-PSS Signatures

Loading:
- public key files hold one SPKI ``PUBLIC KEY`` PEM block; the file text is
  kept verbatim (whitespace-trimmed) as ``keyval.public``.
- private key files hold one PKCS#1 ``RSA PRIVATE KEY`` PEM block. The public
  half is re-derived and re-encoded as SPKI PEM, so ``keyval.public`` of a
  loaded private key is normalized while a loaded public key is not. Existing
  key IDs depend on this asymmetry.

Signing:
- RSASSA-PSS over SHA-256(data), MGF1-SHA256, salt length 32.
  securesystemslib uses the digest size as salt length, not the PSS maximum.
"""
from __future__ import annotations

import logging
from pathlib import Path

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa, utils

from keylib.crypto.hashing import from_hex, sha256, to_hex
from keylib.crypto.keyfile import decode_key_text, read_key_file
from keylib.crypto.pem import decode_pem
from keylib.schemas.errors import (
    FormatException,
    KeylibException,
    KeyTypeException,
    ParseException,
    SignatureVerificationException,
)
from keylib.schemas.keys import (
    DEFAULT_KEYID_HASH_ALGORITHMS,
    RSA_KEY_TYPE,
    Key,
    KeyVal,
    RSAKey,
    Signature,
    check_key_type,
)


logger = logging.getLogger(__name__)


# SHA-256 digest size
PSS_SALT_LENGTH = 32


def _pss_padding() -> padding.PSS:
    return padding.PSS(
        mgf=padding.MGF1(hashes.SHA256()),
        salt_length=PSS_SALT_LENGTH,
    )


# =============================================================================
# Parsing
# =============================================================================

def parse_rsa_public_pem(pem_bytes: bytes | str) -> rsa.RSAPublicKey:
    """
    Parse the first PEM block of ``pem_bytes`` as an RSA public key.

    Raises:
        FormatException: No PEM block found.
        ParseException: The block does not hold a valid public key.
        KeyTypeException: The public key is not RSA (e.g. DSA or ECDSA).
    """
    block = decode_pem(pem_bytes, "public key")

    try:
        public_key = serialization.load_der_public_key(block.der)
    except (ValueError, UnsupportedAlgorithm) as e:
        raise ParseException(
            f"invalid public key encoding: {e}",
            details={"label": block.label},
        ) from e

    if not isinstance(public_key, rsa.RSAPublicKey):
        raise KeyTypeException(
            f"We currently only support rsa keys: got '{type(public_key).__name__}'",
            expected="rsa",
            actual=type(public_key).__name__,
        )
    return public_key


def parse_rsa_private_pem(pem_bytes: bytes | str) -> rsa.RSAPrivateKey:
    """
    Parse the first PEM block of ``pem_bytes`` as a PKCS#1 RSA private key.

    The DER itself must be a PKCS#1 ``RSAPrivateKey`` structure; the block
    label is not consulted.

    Raises:
        FormatException: No PEM block found, or the block is encrypted.
        ParseException: The DER is not a PKCS#1 RSA private key.
    """
    block = decode_pem(pem_bytes, "private key")

    if block.is_encrypted:
        raise FormatException(
            "encrypted private keys are not supported",
            details={"label": block.label},
        )

    try:
        private_key = serialization.load_der_private_key(block.der, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise ParseException(f"invalid private key encoding: {e}") from e

    if not isinstance(private_key, rsa.RSAPrivateKey) or _pkcs1_der(private_key) != block.der:
        raise ParseException(
            "private key is not a PKCS#1 RSA private key",
            details={"label": block.label},
        )
    return private_key


def _pkcs1_der(private_key: rsa.RSAPrivateKey) -> bytes:
    return private_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )


def rsa_public_pem_from_private(private_key: rsa.RSAPrivateKey) -> str:
    """SPKI ``PUBLIC KEY`` PEM of the private key's public half, trimmed."""
    pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return pem.decode("ascii").strip()


# =============================================================================
# Loading
# =============================================================================

def load_rsa_public_key(path: str | Path) -> RSAKey:
    """
    Load an RSA public key from a PEM file.

    The PEM is parsed only to validate it; ``keyval.public`` is the original
    file text with surrounding whitespace removed.

    Raises:
        KeyFileError, FormatException, ParseException, KeyTypeException
    """
    key_bytes = read_key_file(path)
    parse_rsa_public_pem(key_bytes)

    key = RSAKey(
        key_id_hash_algorithms=list(DEFAULT_KEYID_HASH_ALGORITHMS),
        key_val=KeyVal(public=decode_key_text(key_bytes, path).strip()),
    )
    key.generate_key_id()
    logger.debug("Loaded rsa public key %s from %s", key.key_id, path)
    return key


def load_rsa_private_key(path: str | Path) -> RSAKey:
    """
    Load an RSA private key from a PKCS#1 PEM file.

    ``keyval.private`` is the original file text, trimmed; ``keyval.public``
    is the derived public key re-encoded as SPKI PEM.

    Raises:
        KeyFileError, FormatException, ParseException
    """
    key_bytes = read_key_file(path)
    private_key = parse_rsa_private_pem(key_bytes)

    key = RSAKey(
        key_id_hash_algorithms=list(DEFAULT_KEYID_HASH_ALGORITHMS),
        key_val=KeyVal(
            public=rsa_public_pem_from_private(private_key),
            private=decode_key_text(key_bytes, path).strip(),
        )
    )
    key.generate_key_id()
    logger.debug("Loaded rsa private key %s from %s", key.key_id, path)
    return key


# =============================================================================
# Signatures
# =============================================================================

def generate_rsa_signature(signable: bytes, key: Key) -> Signature:
    """
    Sign ``signable`` with the key's private half using RSASSA-PSS-SHA256.

    Raises:
        KeyTypeException: The key is not an rsa key.
        MissingPrivateKeyException: The key has no private half.
        FormatException, ParseException: The private PEM is malformed.
    """
    check_key_type({"keytype": key.key_type, "scheme": key.scheme}, expected=RSA_KEY_TYPE)
    private_key = parse_rsa_private_pem(key.require_private())

    digest = sha256(signable)
    signature = private_key.sign(
        digest,
        _pss_padding(),
        utils.Prehashed(hashes.SHA256()),
    )

    return Signature(key_id=key.key_id, sig=to_hex(signature))


def verify_rsa_signature(key: Key, signature: Signature, data: bytes) -> None:
    """
    Verify an RSASSA-PSS-SHA256 signature over ``data``.

    Raises:
        SignatureVerificationException: Bad signature, malformed signature
            hex, or a public key that is not a valid RSA PEM.
    """
    try:
        public_key = parse_rsa_public_pem(key.key_val.public)
    except KeylibException as e:
        raise SignatureVerificationException(
            f"invalid rsa public key: {e.message}",
            key_id=key.key_id,
        ) from e

    try:
        sig_bytes = from_hex(signature.sig, field="sig")
    except FormatException as e:
        raise SignatureVerificationException(
            f"malformed signature: {e.message}",
            key_id=key.key_id,
        ) from e

    digest = sha256(data)
    try:
        public_key.verify(
            sig_bytes,
            digest,
            _pss_padding(),
            utils.Prehashed(hashes.SHA256()),
        )
    except InvalidSignature as e:
        raise SignatureVerificationException(
            "invalid rsassa-pss-sha256 signature",
            key_id=key.key_id,
        ) from e


__all__ = [
    "PSS_SALT_LENGTH",
    "parse_rsa_public_pem",
    "parse_rsa_private_pem",
    "rsa_public_pem_from_private",
    "load_rsa_public_key",
    "load_rsa_private_key",
    "generate_rsa_signature",
    "verify_rsa_signature",
]
