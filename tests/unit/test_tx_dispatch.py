"""
Tagged-union dispatch: decoding by leading type tag and JSON envelopes.
"""
from __future__ import annotations

import pytest

from codechain_sdk.encoding import canonical
from codechain_sdk.errors import EncodingError, MalformedInputError
from codechain_sdk.tx import (AssetMintTransaction, AssetTransferTransaction,
                              TxType, decode_transaction,
                              transaction_from_json, tx_type_of)


def test_type_tags():
    assert int(TxType.ASSET_MINT) == 3
    assert int(TxType.ASSET_TRANSFER) == 4
    assert AssetMintTransaction.TYPE is TxType.ASSET_MINT
    assert AssetTransferTransaction.TYPE is TxType.ASSET_TRANSFER


def test_tx_type_of_reads_leading_integer(lock_hash):
    mint = AssetMintTransaction(metadata="m", lock_script_hash=lock_hash)
    assert tx_type_of(canonical.decode(mint.rlp_bytes())) is TxType.ASSET_MINT
    assert tx_type_of(canonical.decode(AssetTransferTransaction().rlp_bytes())) is TxType.ASSET_TRANSFER


@pytest.mark.parametrize("tag", [0, 1, 2, 5, 255])
def test_unknown_tag_is_malformed(tag):
    with pytest.raises(MalformedInputError):
        decode_transaction(canonical.encode([tag, [], [], []]))


@pytest.mark.parametrize(
    "raw",
    [
        canonical.encode(b"not a list"),
        canonical.encode([]),
        canonical.encode([[3]]),
    ],
)
def test_non_transaction_shapes_are_malformed(raw):
    with pytest.raises(MalformedInputError):
        decode_transaction(raw)


def test_undecodable_bytes():
    with pytest.raises(EncodingError):
        decode_transaction(b"\xc3\x01")


def test_empty_transfer_roundtrip():
    tx = AssetTransferTransaction()
    assert tx.rlp_bytes() == bytes.fromhex("c404c0c0c0")
    assert decode_transaction(tx.rlp_bytes()) == tx


def test_from_json_dispatches(lock_hash):
    mint = AssetMintTransaction(metadata="m", lock_script_hash=lock_hash, amount=1)
    transfer = AssetTransferTransaction()
    assert transaction_from_json(mint.to_json()) == mint
    assert transaction_from_json(transfer.to_json()) == transfer


@pytest.mark.parametrize(
    "envelope",
    [
        {"type": "assetCompose", "data": {}},
        {"type": "assetMint"},
        {"data": {}},
        {"type": ["assetMint"], "data": {}},
        "assetMint",
    ],
)
def test_from_json_rejects_bad_envelopes(envelope):
    with pytest.raises(MalformedInputError):
        transaction_from_json(envelope)  # type: ignore[arg-type]
