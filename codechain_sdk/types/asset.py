from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from codechain_sdk.primitives import H256
from codechain_sdk.tx.transfer import AssetOutPoint, AssetTransferInput
from codechain_sdk.utils import fields as f
from codechain_sdk.utils.bytes import to_hex


@dataclass(frozen=True)
class Asset:
    """
    An unspent output: `amount` units of `asset_type`, locked by the script
    whose hash is `lock_script_hash`, created as output
    `transaction_output_index` of `transaction_hash`.
    """

    asset_type: H256
    lock_script_hash: H256
    parameters: Tuple[bytes, ...]
    amount: int
    transaction_hash: H256
    transaction_output_index: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "asset_type", H256.ensure(self.asset_type))
        object.__setattr__(self, "lock_script_hash", H256.ensure(self.lock_script_hash))
        object.__setattr__(
            self, "parameters", f.check_buffers(self.parameters, name="parameters")
        )
        object.__setattr__(self, "amount", f.check_amount(self.amount))
        object.__setattr__(self, "transaction_hash", H256.ensure(self.transaction_hash))
        object.__setattr__(
            self, "transaction_output_index", f.check_amount(self.transaction_output_index)
        )

    def out_point(self) -> AssetOutPoint:
        return AssetOutPoint(
            transaction_hash=self.transaction_hash,
            index=self.transaction_output_index,
            asset_type=self.asset_type,
            amount=self.amount,
        )

    def create_transfer_input(
        self, *, lock_script: bytes = b"", unlock_script: bytes = b""
    ) -> AssetTransferInput:
        return AssetTransferInput(
            prev_out=self.out_point(), lock_script=lock_script, unlock_script=unlock_script
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "assetType": self.asset_type.value,
            "lockScriptHash": self.lock_script_hash.value,
            "parameters": [to_hex(p) for p in self.parameters],
            "amount": self.amount,
            "transactionHash": self.transaction_hash.value,
            "transactionOutputIndex": self.transaction_output_index,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Asset":
        owner = "Asset"
        data = f.expect_record(data, owner=owner)
        return cls(
            asset_type=H256(f.require(data, "assetType", owner=owner)),
            lock_script_hash=H256(f.require(data, "lockScriptHash", owner=owner)),
            parameters=f.read_buffers(data, "parameters", owner=owner),
            amount=f.check_amount(f.require(data, "amount", owner=owner)),
            transaction_hash=H256(f.require(data, "transactionHash", owner=owner)),
            transaction_output_index=f.read_index(data, "transactionOutputIndex", owner=owner),
        )


__all__ = ["Asset"]
