"""
codechain_sdk.address
=====================

Address and identifier derivation.

Asset addresses
---------------
A mint transaction names two ledger objects, both derived from its content
hash `h = blake256(canonical_bytes(tx))`:

    scheme  = keyed_blake256(h, key=00*8 || ff*8)   with hex[:16] := "5300000000000000"
    asset   = keyed_blake256(h, key=00*16)          with hex[:16] := "4100000000000000"

The two keys separate the domains; the prefix makes the address kind
readable from its first bytes while the remaining 48 hex characters keep the
keyed digest. Transfers have no such addresses.

Key identifiers
---------------
- `account_id_from_public(pub)` → H160 = blake160(pub), the platform account id.
- `asset_key_id_from_public(pub)` → H256 = blake256(pub), the asset-unlock key id.

The two mappings produce values of different widths, so a public key used in
both roles never yields the same identifier.
"""

from __future__ import annotations

from codechain_sdk.primitives import H160, H256, H512, HashLike
from codechain_sdk.utils.hash import blake160, blake256, blake256_with_key

__all__ = [
    "ASSET_SCHEME_MASK",
    "ASSET_MASK",
    "ASSET_SCHEME_PREFIX",
    "ASSET_PREFIX",
    "derive_asset_scheme_address",
    "derive_asset_address",
    "is_asset_scheme_address",
    "is_asset_address",
    "account_id_from_public",
    "asset_key_id_from_public",
]

ASSET_SCHEME_MASK = bytes(8) + b"\xff" * 8
ASSET_MASK = bytes(16)

ASSET_SCHEME_PREFIX = "5300000000000000"
ASSET_PREFIX = "4100000000000000"


def _prefixed(digest: bytes, prefix: str) -> H256:
    h = digest.hex()
    return H256(prefix + h[len(prefix):])


def derive_asset_scheme_address(tx_hash: HashLike) -> H256:
    """Asset-scheme address for the mint transaction whose hash is *tx_hash*."""
    digest = blake256_with_key(H256.ensure(tx_hash).to_bytes(), ASSET_SCHEME_MASK)
    return _prefixed(digest, ASSET_SCHEME_PREFIX)


def derive_asset_address(tx_hash: HashLike) -> H256:
    """Address of the asset minted by the transaction whose hash is *tx_hash*."""
    digest = blake256_with_key(H256.ensure(tx_hash).to_bytes(), ASSET_MASK)
    return _prefixed(digest, ASSET_PREFIX)


def is_asset_scheme_address(address: HashLike) -> bool:
    return H256.check(address) and H256.ensure(address).value.startswith(ASSET_SCHEME_PREFIX)


def is_asset_address(address: HashLike) -> bool:
    return H256.check(address) and H256.ensure(address).value.startswith(ASSET_PREFIX)


def account_id_from_public(public_key: HashLike) -> H160:
    return H160(blake160(H512.ensure(public_key).to_bytes()))


def asset_key_id_from_public(public_key: HashLike) -> H256:
    return H256(blake256(H512.ensure(public_key).to_bytes()))
