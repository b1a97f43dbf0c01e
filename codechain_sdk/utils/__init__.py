"""
Utility helpers for the SDK.

Re-exports:
- bytes: hex helpers and minimal big-endian integers
- hash: BLAKE2b convenience wrappers (plain, keyed, 160-bit)
"""

from .bytes import (be_to_int, ensure_bytes, from_hex, int_to_be_minimal,
                    to_hex)
from .hash import blake160, blake256, blake256_with_key

__all__ = [
    # bytes
    "to_hex",
    "from_hex",
    "ensure_bytes",
    "int_to_be_minimal",
    "be_to_int",
    # hash
    "blake256",
    "blake256_with_key",
    "blake160",
]
