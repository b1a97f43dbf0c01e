"""
Field readers for loosely-typed (JSON-like) input records.

Required fields that are missing raise MalformedInputError. Optional fields
that are missing or explicitly null read as None. Values that are present
but malformed (bad hex, wrong width, negative amounts) raise ConversionError
from the primitive types.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Tuple

from codechain_sdk.errors import ConversionError, MalformedInputError
from codechain_sdk.primitives import U256
from codechain_sdk.utils.bytes import ensure_bytes, is_byteslike

_MISSING = object()


def expect_record(data: Any, *, owner: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise MalformedInputError(f"{owner} expects an object", got=type(data).__name__)
    return data


def require(data: Mapping[str, Any], key: str, *, owner: str) -> Any:
    value = data.get(key, _MISSING)
    if value is _MISSING or value is None:
        raise MalformedInputError(f"{owner} is missing required field '{key}'", field=key)
    return value


def optional(data: Mapping[str, Any], key: str) -> Optional[Any]:
    return data.get(key)


def read_str(data: Mapping[str, Any], key: str, *, owner: str) -> str:
    value = require(data, key, owner=owner)
    if not isinstance(value, str):
        raise MalformedInputError(f"{owner}.{key} must be a string", field=key)
    return value


def read_index(data: Mapping[str, Any], key: str, *, owner: str) -> int:
    value = require(data, key, owner=owner)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise MalformedInputError(f"{owner}.{key} must be a non-negative integer", field=key)
    return value


def to_buffer(value: Any) -> bytes:
    """
    Accept the shapes a byte buffer takes in JSON:
      - hex string (with or without 0x)
      - list of byte values [0..255]
      - {"type": "Buffer", "data": [...]} (Node.js Buffer.toJSON)
      - bytes-like
    """
    if is_byteslike(value) or isinstance(value, str):
        return ensure_bytes(value)
    if isinstance(value, Mapping) and value.get("type") == "Buffer":
        value = value.get("data")
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        try:
            return bytes(value)
        except (TypeError, ValueError) as e:
            raise ConversionError("byte arrays must hold integers in 0..255") from e
    raise ConversionError("unsupported byte buffer shape", got=type(value).__name__)


def read_buffer(data: Mapping[str, Any], key: str, *, owner: str) -> bytes:
    return to_buffer(require(data, key, owner=owner))


def read_buffers(data: Mapping[str, Any], key: str, *, owner: str) -> Tuple[bytes, ...]:
    value = require(data, key, owner=owner)
    if isinstance(value, (str, bytes, bytearray, Mapping)) or not isinstance(value, Sequence):
        raise MalformedInputError(f"{owner}.{key} must be a list of buffers", field=key)
    return tuple(to_buffer(v) for v in value)


def read_records(data: Mapping[str, Any], key: str, *, owner: str) -> Sequence[Mapping[str, Any]]:
    value = require(data, key, owner=owner)
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        raise MalformedInputError(f"{owner}.{key} must be a list", field=key)
    return [expect_record(v, owner=f"{owner}.{key}[]") for v in value]


def check_amount(value: Any) -> int:
    """Validate a quantity through U256 and return it as a plain int."""
    return U256.ensure(value).value


def check_buffers(values: Any, *, name: str) -> Tuple[bytes, ...]:
    if isinstance(values, (str, bytes, bytearray)):
        raise ConversionError(f"{name} must be a sequence of byte buffers")
    return tuple(to_buffer(v) for v in values)


__all__ = [
    "expect_record",
    "require",
    "optional",
    "read_str",
    "read_index",
    "to_buffer",
    "read_buffer",
    "read_buffers",
    "read_records",
    "check_amount",
    "check_buffers",
]
