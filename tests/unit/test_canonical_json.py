"""
Schemas & Canonicalization
File: tests/unit/test_canonical_json.py

Purpose: Unit tests for the canonical JSON encoder used for key IDs.
These tests pin the byte output, since key IDs must match other
implementations exactly.
"""

import pytest
from pydantic import BaseModel, ConfigDict, Field

from keylib.schemas import (
    CanonicalizationException,
    canonical_equals,
    dumps_canonical,
    encode_canonical,
)


class TestPrimitives:
    """Tests for scalar values."""

    def test_null_and_bools(self):
        assert dumps_canonical(None) == "null"
        assert dumps_canonical(True) == "true"
        assert dumps_canonical(False) == "false"

    def test_integers(self):
        assert dumps_canonical(0) == "0"
        assert dumps_canonical(-17) == "-17"
        assert dumps_canonical(2**64) == "18446744073709551616"

    def test_float_rejected(self):
        """Floats have no canonical form."""
        with pytest.raises(CanonicalizationException) as exc_info:
            dumps_canonical({"a": 1.5})

        assert exc_info.value.code == "CANONICALIZATION_ERROR"
        assert exc_info.value.details["path"] == "a"

    def test_unsupported_type_rejected(self):
        with pytest.raises(CanonicalizationException):
            dumps_canonical({"a": object()})


class TestStrings:
    """Tests for string escaping."""

    def test_only_quote_and_backslash_escaped(self):
        assert dumps_canonical('a"b') == '"a\\"b"'
        assert dumps_canonical("a\\b") == '"a\\\\b"'

    def test_newlines_emitted_raw(self):
        """PEM text keeps its raw newlines, unlike json.dumps."""
        pem = "-----BEGIN PUBLIC KEY-----\nAAAA\n-----END PUBLIC KEY-----"

        assert dumps_canonical(pem) == '"' + pem + '"'

    def test_non_ascii_emitted_as_utf8(self):
        assert encode_canonical("é") == '"é"'.encode("utf-8")


class TestContainers:
    """Tests for objects and arrays."""

    def test_sorted_keys_no_whitespace(self):
        obj = {"z": 3, "a": 1, "m": [1, 2]}

        assert dumps_canonical(obj) == '{"a":1,"m":[1,2],"z":3}'

    def test_key_order_independent(self):
        dict1 = {"zebra": 1, "apple": {"y": 2, "x": 3}}
        dict2 = {"apple": {"x": 3, "y": 2}, "zebra": 1}

        assert encode_canonical(dict1) == encode_canonical(dict2)

    def test_list_order_preserved(self):
        assert dumps_canonical(["b", "a"]) == '["b","a"]'

    def test_tuple_encoded_as_list(self):
        assert dumps_canonical(("sha256", "sha512")) == '["sha256","sha512"]'

    def test_non_string_key_rejected(self):
        with pytest.raises(CanonicalizationException):
            dumps_canonical({1: "a"})

    def test_empty_containers(self):
        assert dumps_canonical({}) == "{}"
        assert dumps_canonical([]) == "[]"

    def test_securesystemslib_key_payload(self):
        """Exact bytes of a key ID payload."""
        payload = {
            "keytype": "ed25519",
            "scheme": "ed25519",
            "keyid_hash_algorithms": ["sha256", "sha512"],
            "keyval": {"public": "ab"},
        }

        assert encode_canonical(payload) == (
            b'{"keyid_hash_algorithms":["sha256","sha512"],'
            b'"keytype":"ed25519","keyval":{"public":"ab"},"scheme":"ed25519"}'
        )


class TestPydanticModels:
    """Models are encoded by alias with None fields dropped."""

    class _Sample(BaseModel):
        model_config = ConfigDict(populate_by_name=True)

        key_id: str = Field(alias="keyid")
        note: str | None = None

    def test_model_dumped_by_alias(self):
        sample = self._Sample(key_id="abc")

        assert dumps_canonical(sample) == '{"keyid":"abc"}'


class TestCanonicalEquals:

    def test_equal_for_reordered_dicts(self):
        assert canonical_equals({"a": 1, "b": 2}, {"b": 2, "a": 1})

    def test_not_equal_for_different_values(self):
        assert not canonical_equals({"a": 1}, {"a": 2})

    def test_not_equal_when_not_canonicalizable(self):
        assert not canonical_equals({"a": 1.0}, {"a": 1.0})
