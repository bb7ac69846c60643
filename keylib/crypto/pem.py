"""
PEM Block Decoding

Finds the first PEM block in a byte string and returns its label, headers and
DER payload. Anything after the first valid block is ignored.

A block whose body is not valid base64 is skipped, as if it were not a PEM
block at all.
"""
from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass, field

from keylib.schemas.errors import FormatException


_PEM_BLOCK_RE = re.compile(
    rb"-----BEGIN (?P<label>[^\r\n-]*)-----\r?\n"
    rb"(?P<body>.*?)"
    rb"-----END (?P=label)-----",
    re.DOTALL,
)


@dataclass(frozen=True)
class PemBlock:
    """One decoded PEM block."""
    label: str
    der: bytes
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_encrypted(self) -> bool:
        if "ENCRYPTED" in self.label:
            return True
        return "ENCRYPTED" in self.headers.get("Proc-Type", "")


def _split_headers(body: bytes) -> tuple[dict[str, str], bytes]:
    """Split RFC 1421 style ``Name: value`` headers from the base64 body."""
    lines = body.splitlines()
    if not lines or b":" not in lines[0]:
        return {}, body

    headers: dict[str, str] = {}
    rest = 0
    for i, line in enumerate(lines):
        if not line.strip():
            rest = i + 1
            break
        name, _, value = line.decode("ascii", errors="replace").partition(":")
        headers[name.strip()] = value.strip()
        rest = i + 1
    return headers, b"\n".join(lines[rest:])


def decode_pem(data: bytes | str, what: str = "PEM") -> PemBlock:
    """
    Decode the first PEM block in ``data``.

    Args:
        data: PEM text or bytes.
        what: Description used in the error message, e.g. "public key".

    Raises:
        FormatException: If no PEM block can be found.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    for match in _PEM_BLOCK_RE.finditer(data):
        headers, b64 = _split_headers(match.group("body"))
        try:
            der = base64.b64decode(b"".join(b64.split()), validate=True)
        except (binascii.Error, ValueError):
            continue
        return PemBlock(
            label=match.group("label").decode("ascii", errors="replace"),
            der=der,
            headers=headers,
        )

    raise FormatException(f"Could not find a {what} PEM block")


__all__ = ["PemBlock", "decode_pem"]
