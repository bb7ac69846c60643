"""
Signature dispatch by key type.

Routes sign/verify/load calls to the RSA or Ed25519 implementation based on
the key's ``keytype``. Each Key variant pins its scheme, so dispatching on
the keytype also selects the scheme.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable

from keylib.crypto.ed25519 import (
    generate_ed25519_signature,
    load_ed25519_private_key,
    load_ed25519_public_key,
    verify_ed25519_signature,
)
from keylib.crypto.rsa import (
    generate_rsa_signature,
    load_rsa_private_key,
    load_rsa_public_key,
    verify_rsa_signature,
)
from keylib.schemas.errors import KeyTypeException
from keylib.schemas.keys import (
    ED25519_KEY_TYPE,
    RSA_KEY_TYPE,
    AnyKey,
    Key,
    Signature,
    check_key_type,
)


Signer = Callable[[bytes, Key], Signature]
Verifier = Callable[[Key, Signature, bytes], None]
Loader = Callable[[str | Path], AnyKey]


SIGNERS: dict[str, Signer] = {
    RSA_KEY_TYPE: generate_rsa_signature,
    ED25519_KEY_TYPE: generate_ed25519_signature,
}

VERIFIERS: dict[str, Verifier] = {
    RSA_KEY_TYPE: verify_rsa_signature,
    ED25519_KEY_TYPE: verify_ed25519_signature,
}

PUBLIC_LOADERS: dict[str, Loader] = {
    RSA_KEY_TYPE: load_rsa_public_key,
    ED25519_KEY_TYPE: load_ed25519_public_key,
}

PRIVATE_LOADERS: dict[str, Loader] = {
    RSA_KEY_TYPE: load_rsa_private_key,
    ED25519_KEY_TYPE: load_ed25519_private_key,
}


def _resolve(key: Key) -> str:
    check_key_type({"keytype": key.key_type, "scheme": key.scheme})
    return key.key_type


def generate_signature(signable: bytes, key: Key) -> Signature:
    """Sign ``signable`` with ``key`` using the scheme of its keytype."""
    return SIGNERS[_resolve(key)](signable, key)


def verify_signature(key: Key, signature: Signature, data: bytes) -> None:
    """
    Verify ``signature`` over ``data`` with ``key``.

    Raises:
        KeyTypeException: Unsupported keytype or mismatched scheme.
        SignatureVerificationException, FormatException: As raised by the
            scheme-specific verifier.
    """
    VERIFIERS[_resolve(key)](key, signature, data)


def load_key(path: str | Path, key_type: str, private: bool = False) -> AnyKey:
    """Load a public (default) or private key file of the given keytype."""
    loaders = PRIVATE_LOADERS if private else PUBLIC_LOADERS
    loader = loaders.get(key_type)
    if loader is None:
        raise KeyTypeException(
            f"unsupported keytype: {key_type!r}",
            expected="|".join(loaders),
            actual=key_type,
        )
    return loader(path)


__all__ = [
    "SIGNERS",
    "VERIFIERS",
    "generate_signature",
    "verify_signature",
    "load_key",
]
