"""
Schemas & Canonicalization
File: keys.py

Purpose: Key and Signature entities in the securesystemslib key-dict shape.

Wire shape (aliases):
    Key:       {keytype, scheme, keyid, keyid_hash_algorithms, keyval: {public, private?}}
    Signature: {keyid, sig}

Key is a tagged variant over RSA and Ed25519: the ``keytype``/``scheme`` pair
is pinned per subclass, so an RSAKey can never carry the ed25519 scheme.
"""

from __future__ import annotations

import json
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import FormatException, KeyTypeException, MissingPrivateKeyException


# Per-variant defaults
RSA_KEY_TYPE = "rsa"
RSA_SCHEME = "rsassa-pss-sha256"
ED25519_KEY_TYPE = "ed25519"
ED25519_SCHEME = "ed25519"

# Advertised only; key IDs are always derived with sha256.
# Set by the RSA loaders; parsed key objects keep whatever they carry.
DEFAULT_KEYID_HASH_ALGORITHMS: tuple[str, ...] = ("sha256", "sha512")

SCHEMES_BY_KEY_TYPE: dict[str, str] = {
    RSA_KEY_TYPE: RSA_SCHEME,
    ED25519_KEY_TYPE: ED25519_SCHEME,
}


class KeyVal(BaseModel):
    """Public and optional private key material, both as strings."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    public: str = Field(
        ...,
        description="PEM text (rsa) or 64 lowercase hex chars (ed25519)",
    )
    private: Optional[str] = Field(
        default=None,
        description="Present only on signing keys",
    )


class Key(BaseModel):
    """
    A public-only or public+private key.

    ``key_id`` is derived from the public attributes only; see
    :func:`keylib.crypto.keyid.derive_key_id`. It is assigned once at load
    time and must not be changed afterwards.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )

    key_type: str = Field(..., alias="keytype")
    scheme: str
    key_id: str = Field(default="", alias="keyid")
    key_id_hash_algorithms: Optional[list[str]] = Field(
        default=None,
        alias="keyid_hash_algorithms",
    )
    key_val: KeyVal = Field(..., alias="keyval")

    @property
    def has_private(self) -> bool:
        return bool(self.key_val.private)

    def require_private(self) -> str:
        """Return the private half, or raise if this is a public-only key."""
        if not self.key_val.private:
            raise MissingPrivateKeyException(self.key_id)
        return self.key_val.private

    def generate_key_id(self) -> str:
        """Derive the key ID from the public attributes and store it in place."""
        from keylib.crypto.keyid import generate_key_id

        return generate_key_id(self)

    def public_only(self) -> "Key":
        """Copy of this key without private material; the key ID is unchanged."""
        return self.model_copy(
            update={"key_val": KeyVal(public=self.key_val.public)},
            deep=True,
        )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)


class RSAKey(Key):
    """RSA key; ``keyval`` values are PEM text."""

    key_type: Literal["rsa"] = Field(default=RSA_KEY_TYPE, alias="keytype")
    scheme: Literal["rsassa-pss-sha256"] = RSA_SCHEME


class Ed25519Key(Key):
    """Ed25519 key; ``keyval`` values are 64 lowercase hex chars."""

    key_type: Literal["ed25519"] = Field(default=ED25519_KEY_TYPE, alias="keytype")
    scheme: Literal["ed25519"] = ED25519_SCHEME


AnyKey = Union[RSAKey, Ed25519Key]

KEY_VARIANTS: dict[str, type[Key]] = {
    RSA_KEY_TYPE: RSAKey,
    ED25519_KEY_TYPE: Ed25519Key,
}


def check_key_type(data: dict[str, Any], expected: str | None = None) -> type[Key]:
    """
    Resolve the Key variant for a key dict, checking keytype and scheme.

    Args:
        data: Key dict in wire shape.
        expected: If given, the only acceptable keytype.

    Raises:
        KeyTypeException: Unknown keytype, unexpected keytype, or a scheme
            that does not belong to the keytype.
    """
    key_type = data.get("keytype")
    scheme = data.get("scheme")

    if expected is not None and key_type != expected:
        raise KeyTypeException(
            f"this doesn't appear to be an {expected} key",
            expected=expected,
            actual=str(key_type),
        )

    variant = KEY_VARIANTS.get(key_type) if isinstance(key_type, str) else None
    if variant is None:
        raise KeyTypeException(
            f"unsupported keytype: {key_type!r}",
            expected="|".join(KEY_VARIANTS),
            actual=str(key_type),
        )

    expected_scheme = SCHEMES_BY_KEY_TYPE[key_type]
    if scheme != expected_scheme:
        raise KeyTypeException(
            f"scheme {scheme!r} does not match keytype {key_type!r}",
            expected=expected_scheme,
            actual=str(scheme),
        )

    return variant


def key_from_dict(data: Any, expected: str | None = None) -> AnyKey:
    """
    Build the matching Key variant from a key dict.

    The key ID is taken as given; callers decide whether to derive it.

    Raises:
        FormatException: ``data`` is not a key object.
        KeyTypeException: See :func:`check_key_type`.
    """
    if not isinstance(data, dict):
        raise FormatException("this is not a valid JSON key object")

    variant = check_key_type(data, expected)
    try:
        return variant.model_validate(data)
    except ValidationError as e:
        raise FormatException(
            f"invalid {variant.__name__} object: {e.error_count()} validation error(s)",
            details={"errors": e.errors(include_url=False, include_context=False, include_input=False)},
        ) from e


class Signature(BaseModel):
    """A detached signature: the signing key's ID and the hex signature."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
    )

    key_id: str = Field(..., alias="keyid")
    sig: str = Field(..., description="Lowercase hex of the raw signature bytes")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str | bytes) -> "Signature":
        """
        Parse a ``{keyid, sig}`` object.

        Raises:
            FormatException: Invalid JSON or wrong shape.
        """
        try:
            data = json.loads(text)
        except ValueError as e:
            raise FormatException("this is not a valid JSON signature object") from e
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise FormatException(
                "invalid signature object",
                details={"errors": e.errors(include_url=False, include_context=False, include_input=False)},
            ) from e
