"""
codechain_sdk.tx.mint
=====================

Asset mint transaction (type tag 3).

Wire layout (order is part of the ledger contract):

    [3, metadata, lockScriptHash, parameters, [amount]?, [registrar]?]

`amount` and `registrar` are optional singleton lists: `[]` when absent,
`[value]` when present. An amount of 0 is present.

Derived values
--------------
- `hash()`                      blake256(rlp_bytes())
- `get_asset_scheme_address()`  keyed hash of hash() with the scheme mask, "53…" prefix
- `get_asset_address()`         keyed hash of hash() with the asset mask, "41…" prefix

All three are recomputed on every call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Tuple

from codechain_sdk.address import (derive_asset_address,
                                   derive_asset_scheme_address)
from codechain_sdk.encoding import canonical
from codechain_sdk.encoding.canonical import (Decoded, decode_bytes_list,
                                              decode_optional, decode_uint,
                                              expect_bytes, expect_list)
from codechain_sdk.errors import EncodingError, MalformedInputError
from codechain_sdk.primitives import H160, H256, U256
from codechain_sdk.utils import fields as f
from codechain_sdk.utils.bytes import to_hex
from codechain_sdk.utils.hash import blake256

from .kinds import JSON_TAGS, TxType

if TYPE_CHECKING:  # pragma: no cover
    from codechain_sdk.types.asset import Asset
    from codechain_sdk.types.asset_scheme import AssetScheme


@dataclass(frozen=True)
class AssetMintTransaction:
    TYPE = TxType.ASSET_MINT

    metadata: str
    lock_script_hash: H256
    parameters: Tuple[bytes, ...] = field(default_factory=tuple)
    amount: Optional[int] = None
    registrar: Optional[H160] = None

    def __post_init__(self) -> None:
        if not isinstance(self.metadata, str):
            raise TypeError("AssetMintTransaction.metadata must be str")
        object.__setattr__(self, "lock_script_hash", H256.ensure(self.lock_script_hash))
        object.__setattr__(
            self, "parameters", f.check_buffers(self.parameters, name="parameters")
        )
        if self.amount is not None:
            object.__setattr__(self, "amount", f.check_amount(self.amount))
        if self.registrar is not None:
            object.__setattr__(self, "registrar", H160.ensure(self.registrar))

    # ---- encoding ----

    def to_encode_object(self) -> List[Any]:
        return [
            int(self.TYPE),
            self.metadata,
            self.lock_script_hash,
            list(self.parameters),
            canonical.optional(self.amount),
            canonical.optional(self.registrar),
        ]

    def rlp_bytes(self) -> bytes:
        return canonical.encode(self.to_encode_object())

    def hash(self) -> H256:
        return H256(blake256(self.rlp_bytes()))

    @classmethod
    def from_encode_object(cls, items: Decoded) -> "AssetMintTransaction":
        tag, metadata, lock_script_hash, parameters, amount, registrar = expect_list(
            items, name="AssetMintTransaction", length=6
        )
        if decode_uint(tag, name="type") != TxType.ASSET_MINT:
            raise MalformedInputError("not an asset mint transaction")
        try:
            text = expect_bytes(metadata, name="metadata").decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError("metadata is not valid UTF-8") from e
        amount_item = decode_optional(amount, name="amount")
        registrar_item = decode_optional(registrar, name="registrar")
        return cls(
            metadata=text,
            lock_script_hash=H256(expect_bytes(lock_script_hash, name="lockScriptHash")),
            parameters=decode_bytes_list(parameters, name="parameters"),
            amount=None if amount_item is None else decode_uint(amount_item, name="amount"),
            registrar=(
                None
                if registrar_item is None
                else H160(expect_bytes(registrar_item, name="registrar"))
            ),
        )

    # ---- derived addresses ----

    def get_asset_scheme_address(self) -> H256:
        return derive_asset_scheme_address(self.hash())

    def get_asset_address(self) -> H256:
        return derive_asset_address(self.hash())

    def get_minted_asset(self) -> "Asset":
        """The single output this mint creates (index 0, typed by the scheme address)."""
        from codechain_sdk.types.asset import Asset

        return Asset(
            asset_type=self.get_asset_scheme_address(),
            lock_script_hash=self.lock_script_hash,
            parameters=self.parameters,
            amount=U256.MAX_VALUE if self.amount is None else self.amount,
            transaction_hash=self.hash(),
            transaction_output_index=0,
        )

    def get_asset_scheme(self, network_id: int) -> "AssetScheme":
        from codechain_sdk.types.asset_scheme import AssetScheme

        return AssetScheme(
            network_id=network_id,
            metadata=self.metadata,
            amount=self.amount,
            registrar=self.registrar,
        )

    # ---- JSON ----

    def to_json(self) -> Dict[str, Any]:
        return {
            "type": JSON_TAGS[self.TYPE],
            "data": {
                "metadata": self.metadata,
                "lockScriptHash": self.lock_script_hash.value,
                "parameters": [to_hex(p) for p in self.parameters],
                "amount": self.amount,
                "registrar": None if self.registrar is None else self.registrar.value,
            },
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AssetMintTransaction":
        """
        Build from the `data` record of `to_json()`.

        metadata, lockScriptHash and parameters are required; amount and
        registrar may be null or missing, both meaning absent.
        """
        owner = "AssetMintTransaction"
        data = f.expect_record(data, owner=owner)
        amount = f.optional(data, "amount")
        registrar = f.optional(data, "registrar")
        return cls(
            metadata=f.read_str(data, "metadata", owner=owner),
            lock_script_hash=H256(f.require(data, "lockScriptHash", owner=owner)),
            parameters=f.read_buffers(data, "parameters", owner=owner),
            amount=None if amount is None else f.check_amount(amount),
            registrar=None if registrar is None else H160(registrar),
        )


__all__ = ["AssetMintTransaction"]
