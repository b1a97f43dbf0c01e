from __future__ import annotations

import hashlib

from .bytes import BytesLike, ensure_bytes

# --- BLAKE2b ------------------------------------------------------------------
# The ledger identifies everything by BLAKE2b digests of canonical bytes:
# 32-byte digests for transactions and asset keys, 20-byte digests for
# account ids. The keyed variant is used purely for domain separation.

BLAKE_KEY_MAX = 64


def blake256(data: BytesLike) -> bytes:
    """Return the 32-byte BLAKE2b digest of *data*."""
    return hashlib.blake2b(ensure_bytes(data), digest_size=32).digest()


def blake256_with_key(data: BytesLike, key: BytesLike) -> bytes:
    """Return the 32-byte keyed BLAKE2b digest of *data* under *key*."""
    k = bytes(key)
    if len(k) > BLAKE_KEY_MAX:
        raise ValueError(f"blake2b key must be at most {BLAKE_KEY_MAX} bytes")
    return hashlib.blake2b(ensure_bytes(data), digest_size=32, key=k).digest()


def blake160(data: BytesLike) -> bytes:
    """Return the 20-byte BLAKE2b digest of *data*."""
    return hashlib.blake2b(ensure_bytes(data), digest_size=20).digest()


__all__ = [
    "blake256",
    "blake256_with_key",
    "blake160",
]
