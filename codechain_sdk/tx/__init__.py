"""
codechain_sdk.tx
================

Transaction variants and tagged-union dispatch.

The set of transactions is closed: each variant is a frozen value object
identified by the leading integer of its encoding (`TxType`). Decoding reads
that integer first and hands the remaining fields to the matching variant.

    from codechain_sdk.tx import decode_transaction, transaction_from_json

    tx = decode_transaction(raw)          # AssetMintTransaction | AssetTransferTransaction
    same = transaction_from_json(tx.to_json())
    assert same.hash() == tx.hash()
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Union

from codechain_sdk.encoding import canonical
from codechain_sdk.encoding.canonical import Decoded, decode_uint, expect_list
from codechain_sdk.errors import MalformedInputError

from .kinds import JSON_TAGS, TxType
from .mint import AssetMintTransaction
from .transfer import (AssetOutPoint, AssetTransferInput, AssetTransferOutput,
                       AssetTransferTransaction)

Transaction = Union[AssetMintTransaction, AssetTransferTransaction]

_DECODERS: Dict[TxType, Callable[[Decoded], Transaction]] = {
    TxType.ASSET_MINT: AssetMintTransaction.from_encode_object,
    TxType.ASSET_TRANSFER: AssetTransferTransaction.from_encode_object,
}

_FROM_JSON: Dict[str, Callable[[Mapping[str, Any]], Transaction]] = {
    JSON_TAGS[TxType.ASSET_MINT]: AssetMintTransaction.from_json,
    JSON_TAGS[TxType.ASSET_TRANSFER]: AssetTransferTransaction.from_json,
}


def tx_type_of(items: Decoded) -> TxType:
    """Read the variant tag from a decoded transaction list."""
    fields = expect_list(items, name="transaction")
    if not fields:
        raise MalformedInputError("empty transaction")
    tag = decode_uint(fields[0], name="type")
    try:
        return TxType(tag)
    except ValueError as e:
        raise MalformedInputError(f"unknown transaction type {tag}", type=tag) from e


def decode_transaction(data: bytes) -> Transaction:
    """Decode canonical transaction bytes, dispatching on the leading type tag."""
    items = canonical.decode(data)
    return _DECODERS[tx_type_of(items)](items)


def transaction_from_json(data: Mapping[str, Any]) -> Transaction:
    """Build a transaction from `{"type": ..., "data": {...}}` as produced by `to_json()`."""
    if not isinstance(data, Mapping):
        raise MalformedInputError("transaction JSON must be an object")
    kind = data.get("type")
    body = data.get("data")
    if kind is None or body is None:
        raise MalformedInputError("transaction JSON needs 'type' and 'data'")
    try:
        builder = _FROM_JSON[kind]
    except (KeyError, TypeError) as e:
        raise MalformedInputError(f"unknown transaction type {kind!r}", type=str(kind)) from e
    return builder(body)


__all__ = [
    "TxType",
    "Transaction",
    "AssetMintTransaction",
    "AssetTransferTransaction",
    "AssetOutPoint",
    "AssetTransferInput",
    "AssetTransferOutput",
    "tx_type_of",
    "decode_transaction",
    "transaction_from_json",
]
