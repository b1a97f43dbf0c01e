"""
codechain_sdk.primitives.hashes
===============================

Fixed-width identifiers: H160 (account ids), H256 (transaction hashes,
script hashes, asset types) and H512 (uncompressed secp256k1 public keys).

Each value is immutable and compares by bytes. The canonical text form is
lowercase hex without a prefix (`.value`), which is also what `str()` and
`to_json()` return. Any input of the wrong length fails with ConversionError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Type, TypeVar, Union

from codechain_sdk.errors import ConversionError
from codechain_sdk.utils.bytes import BytesLike, from_hex, is_byteslike

_H = TypeVar("_H", bound="FixedHash")

HashLike = Union["FixedHash", BytesLike, str]


@dataclass(frozen=True, order=True, init=False)
class FixedHash:
    """Base for the fixed-width byte identifiers. Subclasses set SIZE."""

    SIZE: ClassVar[int] = 0

    raw: bytes = field(repr=False)

    def __init__(self, value: HashLike) -> None:
        object.__setattr__(self, "raw", self._coerce(value))

    @classmethod
    def _coerce(cls, value: Any) -> bytes:
        if isinstance(value, FixedHash):
            data = value.raw
        elif is_byteslike(value):
            data = bytes(value)
        elif isinstance(value, str):
            data = from_hex(value)
        else:
            raise ConversionError(
                f"{cls.__name__} expects bytes or a hex string", got=type(value).__name__
            )
        if len(data) != cls.SIZE:
            raise ConversionError(
                f"{cls.__name__} must be {cls.SIZE} bytes",
                expected=cls.SIZE,
                got=len(data),
            )
        return data

    # ---- constructors ----

    @classmethod
    def ensure(cls: Type[_H], value: HashLike) -> _H:
        """Pass instances of this exact type through; convert everything else."""
        if type(value) is cls:
            return value  # type: ignore[return-value]
        return cls(value)

    @classmethod
    def check(cls, value: Any) -> bool:
        try:
            cls._coerce(value)
        except ConversionError:
            return False
        return True

    @classmethod
    def zero(cls: Type[_H]) -> _H:
        return cls(b"\x00" * cls.SIZE)

    # ---- views ----

    @property
    def value(self) -> str:
        return self.raw.hex()

    def to_bytes(self) -> bytes:
        return self.raw

    def to_hex(self) -> str:
        return "0x" + self.raw.hex()

    def to_encodable(self) -> bytes:
        return self.raw

    def to_json(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"

    def __bytes__(self) -> bytes:
        return self.raw

    def __len__(self) -> int:
        return self.SIZE


class H160(FixedHash):
    SIZE: ClassVar[int] = 20


class H256(FixedHash):
    SIZE: ClassVar[int] = 32


class H512(FixedHash):
    SIZE: ClassVar[int] = 64


__all__ = ["FixedHash", "HashLike", "H160", "H256", "H512"]
