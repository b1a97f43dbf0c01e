"""
codechain_sdk.primitives.uint
=============================

U256: unsigned quantity in [0, 2**256).

The encoder writes it as minimal big-endian bytes: zero is the empty byte
string and no zero padding is ever emitted. Construction from a negative,
fractional or out-of-range value fails with ConversionError.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from codechain_sdk.errors import ConversionError
from codechain_sdk.utils.bytes import int_to_be_minimal

U256Like = Union["U256", int, str, float]

_DEC_RE = re.compile(r"^[0-9]+$")
_HEX_RE = re.compile(r"^0[xX][0-9a-fA-F]+$")


@dataclass(frozen=True, eq=False, init=False)
class U256:
    MAX_VALUE: ClassVar[int] = (1 << 256) - 1

    value: int

    def __init__(self, value: U256Like) -> None:
        object.__setattr__(self, "value", self._coerce(value))

    @classmethod
    def _coerce(cls, value: Any) -> int:
        if isinstance(value, U256):
            return value.value
        # bool is an int subclass; a flag is never a quantity
        if isinstance(value, bool):
            raise ConversionError("U256 does not accept booleans")
        if isinstance(value, int):
            n = value
        elif isinstance(value, float):
            if not value.is_integer():
                raise ConversionError("U256 requires an integral value", value=value)
            n = int(value)
        elif isinstance(value, str):
            s = value.strip()
            if _HEX_RE.match(s):
                n = int(s, 16)
            elif _DEC_RE.match(s):
                n = int(s, 10)
            else:
                raise ConversionError("U256 expects a decimal or 0x-hex string", value=value)
        else:
            raise ConversionError("unsupported type for U256", got=type(value).__name__)
        if n < 0 or n > cls.MAX_VALUE:
            raise ConversionError("U256 value out of range", value=str(n))
        return n

    @classmethod
    def ensure(cls, value: U256Like) -> "U256":
        return value if isinstance(value, U256) else cls(value)

    @classmethod
    def check(cls, value: Any) -> bool:
        try:
            cls._coerce(value)
        except ConversionError:
            return False
        return True

    def is_zero(self) -> bool:
        return self.value == 0

    def to_encodable(self) -> bytes:
        return int_to_be_minimal(self.value)

    def to_hex(self) -> str:
        return hex(self.value)

    def to_json(self) -> str:
        return str(self.value)

    def _other(self, other: Any) -> Any:
        if isinstance(other, U256):
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return NotImplemented

    # Compares by value against U256 and plain int; hashes like the int.
    def __eq__(self, other: Any) -> bool:
        n = self._other(other)
        return n if n is NotImplemented else self.value == n

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: Any) -> bool:
        n = self._other(other)
        return n if n is NotImplemented else self.value < n

    def __le__(self, other: Any) -> bool:
        n = self._other(other)
        return n if n is NotImplemented else self.value <= n

    def __gt__(self, other: Any) -> bool:
        n = self._other(other)
        return n if n is NotImplemented else self.value > n

    def __ge__(self, other: Any) -> bool:
        n = self._other(other)
        return n if n is NotImplemented else self.value >= n

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


__all__ = ["U256", "U256Like"]
