"""
AssetTransferTransaction and its building blocks (out points, inputs, outputs).
"""
from __future__ import annotations

import pytest

from codechain_sdk.encoding import canonical
from codechain_sdk.errors import ConversionError, MalformedInputError
from codechain_sdk.primitives import H256
from codechain_sdk.tx import (AssetMintTransaction, AssetOutPoint,
                              AssetTransferInput, AssetTransferOutput,
                              AssetTransferTransaction, decode_transaction)
from codechain_sdk.types import Asset
from codechain_sdk.utils.hash import blake256


@pytest.fixture
def minted(lock_hash) -> Asset:
    mint = AssetMintTransaction(
        metadata="silver", lock_script_hash=lock_hash, parameters=(), amount=100
    )
    return mint.get_minted_asset()


def _transfer(minted: Asset, lock_hash: H256, *, burns=()) -> AssetTransferTransaction:
    spend = minted.create_transfer_input(lock_script=b"\x01\x02", unlock_script=b"\x03")
    outputs = (
        AssetTransferOutput(
            lock_script_hash=lock_hash, parameters=(), asset_type=minted.asset_type, amount=60
        ),
        AssetTransferOutput(
            lock_script_hash=lock_hash, parameters=(b"\x09",), asset_type=minted.asset_type, amount=40
        ),
    )
    return AssetTransferTransaction(burns=burns, inputs=(spend,), outputs=outputs)


def test_asset_out_point_matches_asset(minted):
    op = minted.out_point()
    assert op.transaction_hash == minted.transaction_hash
    assert op.index == 0
    assert op.asset_type == minted.asset_type
    assert op.amount == 100
    assert op.to_encode_object() == [op.transaction_hash, 0, op.asset_type, 100]


def test_transfer_field_order(minted, lock_hash):
    tx = _transfer(minted, lock_hash)
    obj = tx.to_encode_object()
    assert obj[0] == 4
    assert obj[1] == []
    assert obj[2] == [tx.inputs[0].to_encode_object()]
    assert obj[3] == [o.to_encode_object() for o in tx.outputs]
    assert tx.hash() == H256(blake256(tx.rlp_bytes()))


def test_transfer_hash_depends_on_burns(minted, lock_hash):
    plain = _transfer(minted, lock_hash)
    burning = _transfer(minted, lock_hash, burns=(minted.create_transfer_input(),))
    assert plain.hash() != burning.hash()
    assert _transfer(minted, lock_hash).hash() == plain.hash()


def test_transfer_decode_roundtrip(minted, lock_hash):
    tx = _transfer(minted, lock_hash, burns=(minted.create_transfer_input(),))
    back = decode_transaction(tx.rlp_bytes())
    assert isinstance(back, AssetTransferTransaction)
    assert back == tx


def test_transfer_json_roundtrip(minted, lock_hash):
    tx = _transfer(minted, lock_hash, burns=(minted.create_transfer_input(),))
    js = tx.to_json()
    assert js["type"] == "assetTransfer"
    assert js["data"]["inputs"][0]["lockScript"] == "0102"
    assert js["data"]["inputs"][0]["prevOut"]["transactionHash"] == minted.transaction_hash.value
    back = AssetTransferTransaction.from_json(js["data"])
    assert back == tx
    assert back.hash() == tx.hash()


def test_transfer_json_without_burns(minted, lock_hash):
    tx = _transfer(minted, lock_hash)
    data = dict(tx.to_json()["data"])
    del data["burns"]
    assert AssetTransferTransaction.from_json(data) == tx


def test_transfer_json_missing_inputs(minted, lock_hash):
    data = dict(_transfer(minted, lock_hash).to_json()["data"])
    del data["inputs"]
    with pytest.raises(MalformedInputError):
        AssetTransferTransaction.from_json(data)


def test_out_point_json_errors():
    with pytest.raises(MalformedInputError):
        AssetOutPoint.from_json({"transactionHash": "00" * 32, "index": 0, "assetType": "00" * 32})
    with pytest.raises(MalformedInputError):
        AssetOutPoint.from_json(
            {"transactionHash": "00" * 32, "index": -1, "assetType": "00" * 32, "amount": 1}
        )
    with pytest.raises(ConversionError):
        AssetOutPoint.from_json(
            {"transactionHash": "00" * 31, "index": 0, "assetType": "00" * 32, "amount": 1}
        )


def test_transfer_elements_are_typed(minted):
    with pytest.raises(TypeError):
        AssetTransferTransaction(inputs=(minted.out_point(),))  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        AssetTransferInput(prev_out="not an out point")  # type: ignore[arg-type]


def test_decode_rejects_mint_tag_with_transfer_shape(minted, lock_hash):
    tx = _transfer(minted, lock_hash)
    obj = tx.to_encode_object()
    obj[0] = 3
    with pytest.raises(MalformedInputError):
        decode_transaction(canonical.encode(obj))


def test_asset_json_roundtrip(minted):
    assert Asset.from_json(minted.to_json()) == minted
