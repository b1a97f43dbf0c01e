"""
Canonical encoder stability.

Goals:
- Exact bytes for a known mint record.
- Optional fields: absent ([]) and present ([x]) differ in length; zero is present.
- Decoding then re-encoding yields byte-identical output.
"""
from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from codechain_sdk.encoding import canonical
from codechain_sdk.errors import EncodingError, MalformedInputError
from codechain_sdk.primitives import H160, H256, U256


def test_known_mint_record_bytes(lock_hash):
    out = canonical.encode([3, "m", lock_hash, [], [], []])
    expected = bytes.fromhex("e6036da0") + bytes(31) + b"\x01" + bytes.fromhex("c0c0c0")
    assert out == expected


def test_optional_absent_vs_zero():
    assert canonical.encode(canonical.optional(None)) == b"\xc0"
    assert canonical.encode(canonical.optional(0)) == b"\xc1\x80"
    assert len(canonical.encode(canonical.optional(5))) > len(canonical.encode(canonical.optional(None)))


def test_value_normalization():
    assert canonical.to_encodable(0) == b""
    assert canonical.to_encodable(1024) == b"\x04\x00"
    assert canonical.to_encodable("é") == "é".encode("utf-8")
    assert canonical.to_encodable(U256(1)) == b"\x01"
    assert canonical.to_encodable(H160(bytes(20))) == bytes(20)
    assert canonical.to_encodable((b"a", [b"b"])) == [b"a", [b"b"]]


@pytest.mark.parametrize("bad", [None, True, -1, 1.5, {"a": 1}])
def test_unencodable_values(bad):
    with pytest.raises(EncodingError):
        canonical.encode([bad])


def test_decode_rejects_truncated_input():
    with pytest.raises(EncodingError):
        canonical.decode(b"\xc3\x01")
    with pytest.raises(EncodingError):
        canonical.decode("c0")  # type: ignore[arg-type]


def test_decode_uint_rejects_leading_zero():
    with pytest.raises(MalformedInputError):
        canonical.decode_uint(b"\x00\x01")
    assert canonical.decode_uint(b"") == 0
    assert canonical.decode_uint(b"\x01\x00") == 256


def test_decode_optional_shapes():
    assert canonical.decode_optional([], name="x") is None
    assert canonical.decode_optional([b"\x01"], name="x") == b"\x01"
    with pytest.raises(MalformedInputError):
        canonical.decode_optional([b"", b""], name="x")
    with pytest.raises(MalformedInputError):
        canonical.decode_optional(b"", name="x")


_leaf = st.binary(max_size=80)
_tree = st.recursive(_leaf, lambda children: st.lists(children, max_size=5), max_leaves=25)


@given(_tree)
def test_decode_encode_is_byte_stable(tree):
    enc = canonical.encode(tree)
    assert canonical.encode(canonical.decode(enc)) == enc


@given(st.text(max_size=40), st.text(max_size=40))
def test_distinct_metadata_distinct_bytes(a, b):
    h = H256(bytes(32))
    same = canonical.encode([3, a, h]) == canonical.encode([3, b, h])
    assert same == (a == b)
