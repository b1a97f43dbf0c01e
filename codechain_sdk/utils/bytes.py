"""
codechain_sdk.utils.bytes
=========================

Small byte helpers shared by the primitives, the encoder and the key store:

- Hex helpers: to_hex/from_hex, 0x-prefix management
- Bytes-like normalization: ensure_bytes(), is_byteslike()
- Integer conversions: int_to_be_minimal / be_to_int

Hex parsing is strict (even length, no stray characters) because every hex
string we accept names a fixed-width value or raw script bytes.
"""

from __future__ import annotations

from typing import Union

from codechain_sdk.errors import ConversionError

BytesLike = Union[bytes, bytearray, memoryview]


def is_byteslike(x: object) -> bool:
    return isinstance(x, (bytes, bytearray, memoryview))


def strip0x(s: str) -> str:
    return s[2:] if s.startswith(("0x", "0X")) else s


def to_hex(data: BytesLike, *, prefix: bool = False) -> str:
    """Bytes -> lowercase hex. No '0x' unless asked for."""
    h = bytes(data).hex()
    return f"0x{h}" if prefix else h


def from_hex(s: str) -> bytes:
    """
    Hex string (optionally '0x' prefixed, any case) -> bytes.

    Raises ConversionError on odd length or non-hex characters.
    """
    if not isinstance(s, str):
        raise ConversionError("hex input must be a string", got=type(s).__name__)
    h = strip0x(s.strip())
    if len(h) % 2 != 0:
        raise ConversionError("hex string must have even length", length=len(h))
    try:
        return bytes.fromhex(h)
    except ValueError as e:
        raise ConversionError(f"invalid hex string: {e}") from e


def ensure_bytes(data: Union[BytesLike, str]) -> bytes:
    """
    Accepts:
      - bytes / bytearray / memoryview  -> bytes(data)
      - str: treated as hex; optional '0x' prefix
    """
    if is_byteslike(data):
        return bytes(data)
    if isinstance(data, str):
        return from_hex(data)
    raise ConversionError("expected bytes or hex string", got=type(data).__name__)


def int_to_be_minimal(x: int) -> bytes:
    """Big-endian without leading zeros; 0 -> b''."""
    if x < 0:
        raise ConversionError("negative integers have no unsigned encoding", value=x)
    return x.to_bytes((x.bit_length() + 7) // 8, "big")


def be_to_int(data: BytesLike) -> int:
    return int.from_bytes(bytes(data), "big")


__all__ = [
    "BytesLike",
    "is_byteslike",
    "strip0x",
    "to_hex",
    "from_hex",
    "ensure_bytes",
    "int_to_be_minimal",
    "be_to_int",
]
