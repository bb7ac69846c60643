"""
Schemas & Canonicalization
File: canonical.py

Purpose: Deterministic serialization of key metadata for key ID derivation.

The encoding is the "canonical JSON" used by securesystemslib and the other
in-toto implementations, NOT plain ``json.dumps(sort_keys=True)``:

- object keys sorted, no whitespace between tokens
- strings escape only backslash and double quote; every other character,
  including newlines inside PEM text, is emitted raw as UTF-8
- integers, booleans and null as in JSON
- floats are not representable and are rejected

CRITICAL: Key IDs are only interoperable if this output is byte-identical to
the other implementations. Do not "improve" the escaping rules.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from .errors import CanonicalizationException


def _encode_string(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _encode_value(value: Any, parts: list[str], path: str) -> None:
    if value is None:
        parts.append("null")
        return

    # bool before int, bool is an int subclass
    if isinstance(value, bool):
        parts.append("true" if value else "false")
        return

    if isinstance(value, int):
        parts.append(str(value))
        return

    if isinstance(value, float):
        raise CanonicalizationException(
            message=f"Floating point numbers cannot be canonicalized: {value}",
            details={"path": path, "value": str(value)},
        )

    if isinstance(value, str):
        parts.append(_encode_string(value))
        return

    if isinstance(value, BaseModel):
        dumped = value.model_dump(mode="json", by_alias=True, exclude_none=True)
        _encode_value(dumped, parts, path)
        return

    if isinstance(value, (list, tuple)):
        parts.append("[")
        for i, item in enumerate(value):
            if i:
                parts.append(",")
            _encode_value(item, parts, f"{path}[{i}]")
        parts.append("]")
        return

    if isinstance(value, dict):
        for key in value:
            if not isinstance(key, str):
                raise CanonicalizationException(
                    message=f"Object keys must be strings, got {type(key).__name__}",
                    details={"path": path, "key": repr(key)},
                )
        parts.append("{")
        for i, key in enumerate(sorted(value)):
            if i:
                parts.append(",")
            parts.append(_encode_string(key))
            parts.append(":")
            _encode_value(value[key], parts, f"{path}.{key}" if path else key)
        parts.append("}")
        return

    raise CanonicalizationException(
        message=f"Cannot canonicalize value of type {type(value).__name__}",
        details={"path": path, "type": type(value).__name__},
    )


def dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Args:
        obj: A dict, list, primitive or Pydantic model (dumped by alias).

    Returns:
        The canonical JSON text.

    Raises:
        CanonicalizationException: If the object holds floats, non-string
            object keys or unsupported types.

    Example:
        >>> dumps_canonical({"b": 2, "a": "x\\ny"})
        '{"a":"x\\ny","b":2}'
    """
    parts: list[str] = []
    _encode_value(obj, parts, "")
    return "".join(parts)


def encode_canonical(obj: Any) -> bytes:
    """Canonical JSON encoding of ``obj`` as UTF-8 bytes."""
    return dumps_canonical(obj).encode("utf-8")


def canonical_equals(obj1: Any, obj2: Any) -> bool:
    """
    Check if two objects are canonically equal.

    Objects that cannot be canonicalized are never equal.
    """
    try:
        return dumps_canonical(obj1) == dumps_canonical(obj2)
    except CanonicalizationException:
        return False
