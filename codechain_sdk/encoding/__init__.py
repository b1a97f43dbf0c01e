"""
Canonical wire encoding (RLP) for ledger records.
"""

from .canonical import decode, encode, optional, to_encodable

__all__ = ["encode", "decode", "optional", "to_encodable"]
