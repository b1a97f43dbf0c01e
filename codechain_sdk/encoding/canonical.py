"""
codechain_sdk.encoding.canonical
================================

Canonical (wire) encoding for ledger records.

A record is projected to an ordered sequence of fields (`to_encode_object()`
on every transaction type) and serialized with RLP, the recursive
length-prefix list format the ledger consumes byte-for-byte:

- a byte string is prefixed by its own length,
- a list is prefixed by the combined length of its encoded children,
- nesting is unbounded.

Value normalization (`to_encodable`) happens before the `rlp` library sees
anything, so the library only ever serializes bytes and lists:

    bytes-like          -> bytes
    str                 -> UTF-8 bytes
    int / U256          -> minimal big-endian bytes (0 -> b"")
    H160 / H256 / H512  -> raw bytes
    list / tuple        -> list of the above

Optional fields are written with `optional()`: an empty list when absent and
a one-element list when present, so presence changes the encoded length and
therefore the hash. Zero is a present value.

Everything here is pure; no state survives a call.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union

import rlp
from rlp.exceptions import RLPException

from codechain_sdk.errors import EncodingError, MalformedInputError
from codechain_sdk.utils.bytes import be_to_int, int_to_be_minimal, is_byteslike

Encodable = Union[bytes, List["Encodable"]]
Decoded = Union[bytes, List["Decoded"]]

_MAX_DEPTH = 1_000


def to_encodable(value: Any, *, _depth: int = 0) -> Encodable:
    """Normalize *value* into nested lists of bytes."""
    if _depth > _MAX_DEPTH:
        raise EncodingError("maximum nesting exceeded")
    if hasattr(value, "to_encodable"):
        return value.to_encodable()
    if is_byteslike(value):
        return bytes(value)
    if isinstance(value, bool) or value is None:
        raise EncodingError(
            "value has no canonical encoding; wrap optional fields with optional()",
            got=repr(value),
        )
    if isinstance(value, int):
        if value < 0:
            raise EncodingError("negative integers cannot be encoded", value=value)
        return int_to_be_minimal(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (list, tuple)):
        return [to_encodable(v, _depth=_depth + 1) for v in value]
    raise EncodingError("unsupported value type", got=type(value).__name__)


def encode(fields: Any) -> bytes:
    """Encode an ordered field sequence (or a single value) to canonical bytes."""
    item = to_encodable(fields)
    try:
        return rlp.encode(item)
    except RLPException as e:
        raise EncodingError(f"rlp encoding failed: {e}") from e


def optional(value: Any) -> list:
    """[] when *value* is None, [value] otherwise."""
    return [] if value is None else [value]


# -----------------------------------------------------------------------------
# Decoding
# -----------------------------------------------------------------------------


def decode(data: Union[bytes, bytearray, memoryview]) -> Decoded:
    """Decode canonical bytes into nested lists of bytes."""
    if not is_byteslike(data):
        raise EncodingError("decode expects bytes", got=type(data).__name__)
    try:
        item = rlp.decode(bytes(data))
    except RLPException as e:
        raise EncodingError(f"rlp decoding failed: {e}") from e
    return _as_lists(item)


def _as_lists(item: Any) -> Decoded:
    if isinstance(item, (list, tuple)):
        return [_as_lists(x) for x in item]
    return bytes(item)


def expect_list(item: Decoded, *, name: str, length: Optional[int] = None) -> List[Decoded]:
    if not isinstance(item, list):
        raise MalformedInputError(f"{name} must be a list")
    if length is not None and len(item) != length:
        raise MalformedInputError(
            f"{name} must have {length} items", expected=length, got=len(item)
        )
    return item


def expect_bytes(item: Decoded, *, name: str) -> bytes:
    if not isinstance(item, bytes):
        raise MalformedInputError(f"{name} must be a byte string")
    return item


def decode_uint(item: Decoded, *, name: str = "integer") -> int:
    """Read a minimal big-endian integer; leading zero bytes are rejected."""
    raw = expect_bytes(item, name=name)
    if raw[:1] == b"\x00":
        raise MalformedInputError(f"{name} has a non-canonical leading zero")
    return be_to_int(raw)


def decode_optional(item: Decoded, *, name: str) -> Optional[Decoded]:
    """Inverse of optional(): [] -> None, [x] -> x."""
    lst = expect_list(item, name=name)
    if len(lst) > 1:
        raise MalformedInputError(f"{name} must hold at most one item", got=len(lst))
    return lst[0] if lst else None


def decode_bytes_list(item: Decoded, *, name: str) -> Sequence[bytes]:
    return tuple(expect_bytes(x, name=name) for x in expect_list(item, name=name))


__all__ = [
    "Encodable",
    "Decoded",
    "to_encodable",
    "encode",
    "optional",
    "decode",
    "expect_list",
    "expect_bytes",
    "decode_uint",
    "decode_optional",
    "decode_bytes_list",
]
