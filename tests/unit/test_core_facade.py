"""
Core facade: builds value objects bound to the configured network.
"""
from __future__ import annotations

import pytest

from codechain_sdk import Core, SDKConfig
from codechain_sdk.errors import ConversionError
from codechain_sdk.key import MemoryKeyStore
from codechain_sdk.primitives import H160
from codechain_sdk.tx import AssetMintTransaction, AssetTransferTransaction

pytestmark = pytest.mark.anyio


@pytest.fixture
def core(fast_config) -> Core:
    return Core(network_id=3, config=fast_config)


def test_network_id_override(core, fast_config):
    assert core.network_id == 3
    assert Core(config=fast_config).network_id == 17


def test_create_asset_scheme(core, registrar):
    scheme = core.create_asset_scheme(metadata="gold", amount=1000, registrar=registrar.value)
    assert scheme.network_id == 3
    assert scheme.registrar == registrar
    assert core.create_asset_scheme(metadata="x", amount=None).registrar is None
    with pytest.raises(ConversionError):
        core.create_asset_scheme(metadata="x", amount=1, registrar="0x12")


def test_create_and_reload_mint(core, lock_hash):
    mint = core.create_asset_mint_transaction(
        metadata="gold", lock_script_hash=lock_hash.to_hex(), amount=5
    )
    assert isinstance(mint, AssetMintTransaction)
    assert core.get_transaction_from_json(mint.to_json()) == mint
    assert core.decode_transaction(mint.rlp_bytes()) == mint


def test_transfer_from_minted_asset(core, lock_hash):
    mint = core.create_asset_mint_transaction(metadata="gold", lock_script_hash=lock_hash, amount=5)
    asset = mint.get_minted_asset()
    tx = core.create_asset_transfer_transaction(
        inputs=[asset.create_transfer_input()],
        outputs=[
            core.classes["AssetTransferOutput"](
                lock_script_hash=lock_hash, parameters=(), asset_type=asset.asset_type, amount=5
            )
        ],
    )
    assert isinstance(tx, AssetTransferTransaction)
    assert tx.inputs[0].prev_out.transaction_hash == mint.hash()


async def test_key_store_uses_config(core):
    store = core.create_key_store()
    assert isinstance(store, MemoryKeyStore)
    key = await store.platform.create_key()
    assert H160.check(key)
