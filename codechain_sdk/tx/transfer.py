"""
codechain_sdk.tx.transfer
=========================

Asset transfer transaction (type tag 4) and its building blocks.

Wire layout
-----------
    AssetOutPoint        = [transactionHash, index, assetType, amount]
    AssetTransferInput   = [prevOut, lockScript, unlockScript]
    AssetTransferOutput  = [lockScriptHash, parameters, assetType, amount]
    AssetTransferTx      = [4, burns, inputs, outputs]

Burns are inputs whose assets are destroyed rather than moved. A transfer
has a content hash but, unlike a mint, no derived asset/scheme addresses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from codechain_sdk.encoding import canonical
from codechain_sdk.encoding.canonical import (Decoded, decode_bytes_list,
                                              decode_uint, expect_bytes,
                                              expect_list)
from codechain_sdk.errors import MalformedInputError
from codechain_sdk.primitives import H256
from codechain_sdk.utils import fields as f
from codechain_sdk.utils.bytes import to_hex
from codechain_sdk.utils.hash import blake256

from .kinds import JSON_TAGS, TxType


@dataclass(frozen=True)
class AssetOutPoint:
    """Reference to an output of an earlier transaction."""

    transaction_hash: H256
    index: int
    asset_type: H256
    amount: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "transaction_hash", H256.ensure(self.transaction_hash))
        object.__setattr__(self, "asset_type", H256.ensure(self.asset_type))
        object.__setattr__(self, "index", f.check_amount(self.index))
        object.__setattr__(self, "amount", f.check_amount(self.amount))

    def to_encode_object(self) -> List[Any]:
        return [self.transaction_hash, self.index, self.asset_type, self.amount]

    @classmethod
    def from_encode_object(cls, item: Decoded) -> "AssetOutPoint":
        tx_hash, index, asset_type, amount = expect_list(item, name="AssetOutPoint", length=4)
        return cls(
            transaction_hash=H256(expect_bytes(tx_hash, name="AssetOutPoint.transactionHash")),
            index=decode_uint(index, name="AssetOutPoint.index"),
            asset_type=H256(expect_bytes(asset_type, name="AssetOutPoint.assetType")),
            amount=decode_uint(amount, name="AssetOutPoint.amount"),
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "transactionHash": self.transaction_hash.value,
            "index": self.index,
            "assetType": self.asset_type.value,
            "amount": self.amount,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AssetOutPoint":
        owner = "AssetOutPoint"
        data = f.expect_record(data, owner=owner)
        return cls(
            transaction_hash=H256(f.require(data, "transactionHash", owner=owner)),
            index=f.read_index(data, "index", owner=owner),
            asset_type=H256(f.require(data, "assetType", owner=owner)),
            amount=f.check_amount(f.require(data, "amount", owner=owner)),
        )


@dataclass(frozen=True)
class AssetTransferInput:
    prev_out: AssetOutPoint
    lock_script: bytes = b""
    unlock_script: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.prev_out, AssetOutPoint):
            raise TypeError("AssetTransferInput.prev_out must be AssetOutPoint")
        object.__setattr__(self, "lock_script", f.to_buffer(self.lock_script))
        object.__setattr__(self, "unlock_script", f.to_buffer(self.unlock_script))

    def to_encode_object(self) -> List[Any]:
        return [self.prev_out.to_encode_object(), self.lock_script, self.unlock_script]

    @classmethod
    def from_encode_object(cls, item: Decoded) -> "AssetTransferInput":
        prev_out, lock_script, unlock_script = expect_list(
            item, name="AssetTransferInput", length=3
        )
        return cls(
            prev_out=AssetOutPoint.from_encode_object(prev_out),
            lock_script=expect_bytes(lock_script, name="AssetTransferInput.lockScript"),
            unlock_script=expect_bytes(unlock_script, name="AssetTransferInput.unlockScript"),
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "prevOut": self.prev_out.to_json(),
            "lockScript": to_hex(self.lock_script),
            "unlockScript": to_hex(self.unlock_script),
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AssetTransferInput":
        owner = "AssetTransferInput"
        data = f.expect_record(data, owner=owner)
        return cls(
            prev_out=AssetOutPoint.from_json(f.require(data, "prevOut", owner=owner)),
            lock_script=f.read_buffer(data, "lockScript", owner=owner),
            unlock_script=f.read_buffer(data, "unlockScript", owner=owner),
        )


@dataclass(frozen=True)
class AssetTransferOutput:
    lock_script_hash: H256
    parameters: Tuple[bytes, ...]
    asset_type: H256
    amount: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "lock_script_hash", H256.ensure(self.lock_script_hash))
        object.__setattr__(
            self, "parameters", f.check_buffers(self.parameters, name="parameters")
        )
        object.__setattr__(self, "asset_type", H256.ensure(self.asset_type))
        object.__setattr__(self, "amount", f.check_amount(self.amount))

    def to_encode_object(self) -> List[Any]:
        return [self.lock_script_hash, list(self.parameters), self.asset_type, self.amount]

    @classmethod
    def from_encode_object(cls, item: Decoded) -> "AssetTransferOutput":
        lock_script_hash, parameters, asset_type, amount = expect_list(
            item, name="AssetTransferOutput", length=4
        )
        return cls(
            lock_script_hash=H256(
                expect_bytes(lock_script_hash, name="AssetTransferOutput.lockScriptHash")
            ),
            parameters=decode_bytes_list(parameters, name="AssetTransferOutput.parameters"),
            asset_type=H256(expect_bytes(asset_type, name="AssetTransferOutput.assetType")),
            amount=decode_uint(amount, name="AssetTransferOutput.amount"),
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "lockScriptHash": self.lock_script_hash.value,
            "parameters": [to_hex(p) for p in self.parameters],
            "assetType": self.asset_type.value,
            "amount": self.amount,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AssetTransferOutput":
        owner = "AssetTransferOutput"
        data = f.expect_record(data, owner=owner)
        return cls(
            lock_script_hash=H256(f.require(data, "lockScriptHash", owner=owner)),
            parameters=f.read_buffers(data, "parameters", owner=owner),
            asset_type=H256(f.require(data, "assetType", owner=owner)),
            amount=f.check_amount(f.require(data, "amount", owner=owner)),
        )


def _tuple_of(items: Sequence[Any], kind: type, name: str) -> Tuple[Any, ...]:
    out = tuple(items)
    for it in out:
        if not isinstance(it, kind):
            raise TypeError(f"AssetTransferTransaction.{name} elements must be {kind.__name__}")
    return out


@dataclass(frozen=True)
class AssetTransferTransaction:
    TYPE = TxType.ASSET_TRANSFER

    burns: Tuple[AssetTransferInput, ...] = field(default_factory=tuple)
    inputs: Tuple[AssetTransferInput, ...] = field(default_factory=tuple)
    outputs: Tuple[AssetTransferOutput, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "burns", _tuple_of(self.burns, AssetTransferInput, "burns"))
        object.__setattr__(self, "inputs", _tuple_of(self.inputs, AssetTransferInput, "inputs"))
        object.__setattr__(
            self, "outputs", _tuple_of(self.outputs, AssetTransferOutput, "outputs")
        )

    # ---- encoding ----

    def to_encode_object(self) -> List[Any]:
        return [
            int(self.TYPE),
            [b.to_encode_object() for b in self.burns],
            [i.to_encode_object() for i in self.inputs],
            [o.to_encode_object() for o in self.outputs],
        ]

    def rlp_bytes(self) -> bytes:
        return canonical.encode(self.to_encode_object())

    def hash(self) -> H256:
        return H256(blake256(self.rlp_bytes()))

    @classmethod
    def from_encode_object(cls, items: Decoded) -> "AssetTransferTransaction":
        tag, burns, inputs, outputs = expect_list(items, name="AssetTransferTransaction", length=4)
        if decode_uint(tag, name="type") != TxType.ASSET_TRANSFER:
            raise MalformedInputError("not an asset transfer transaction")
        return cls(
            burns=tuple(
                AssetTransferInput.from_encode_object(x) for x in expect_list(burns, name="burns")
            ),
            inputs=tuple(
                AssetTransferInput.from_encode_object(x)
                for x in expect_list(inputs, name="inputs")
            ),
            outputs=tuple(
                AssetTransferOutput.from_encode_object(x)
                for x in expect_list(outputs, name="outputs")
            ),
        )

    # ---- JSON ----

    def to_json(self) -> Dict[str, Any]:
        return {
            "type": JSON_TAGS[self.TYPE],
            "data": {
                "burns": [b.to_json() for b in self.burns],
                "inputs": [i.to_json() for i in self.inputs],
                "outputs": [o.to_json() for o in self.outputs],
            },
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AssetTransferTransaction":
        owner = "AssetTransferTransaction"
        data = f.expect_record(data, owner=owner)
        # records written before burns existed omit the field
        burns = f.read_records(data, "burns", owner=owner) if data.get("burns") is not None else []
        return cls(
            burns=tuple(AssetTransferInput.from_json(x) for x in burns),
            inputs=tuple(
                AssetTransferInput.from_json(x) for x in f.read_records(data, "inputs", owner=owner)
            ),
            outputs=tuple(
                AssetTransferOutput.from_json(x)
                for x in f.read_records(data, "outputs", owner=owner)
            ),
        )


__all__ = [
    "AssetOutPoint",
    "AssetTransferInput",
    "AssetTransferOutput",
    "AssetTransferTransaction",
]
