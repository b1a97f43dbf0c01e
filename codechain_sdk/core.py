"""
codechain_sdk.core
==================

`Core` is the entry point applications hold on to: it carries the network
id and configuration and builds the value objects of this package.

    from codechain_sdk import Core

    core = Core(network_id=17)
    scheme = core.create_asset_scheme(metadata="gold", amount=10_000, registrar=None)
    mint = scheme.create_mint_transaction(lock_script_hash=lock_hash)
    print(mint.hash(), mint.get_asset_scheme_address())
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from codechain_sdk.config import SDKConfig
from codechain_sdk.key.keystore import MemoryKeyStore
from codechain_sdk.primitives import H160, H256, H512, U256, HashLike
from codechain_sdk.tx import (AssetMintTransaction, AssetOutPoint,
                              AssetTransferInput, AssetTransferOutput,
                              AssetTransferTransaction, Transaction,
                              decode_transaction, transaction_from_json)
from codechain_sdk.types import Asset, AssetScheme


class Core:
    classes = {
        "H160": H160,
        "H256": H256,
        "H512": H512,
        "U256": U256,
        "Asset": Asset,
        "AssetScheme": AssetScheme,
        "AssetOutPoint": AssetOutPoint,
        "AssetTransferInput": AssetTransferInput,
        "AssetTransferOutput": AssetTransferOutput,
        "AssetMintTransaction": AssetMintTransaction,
        "AssetTransferTransaction": AssetTransferTransaction,
        "MemoryKeyStore": MemoryKeyStore,
    }

    def __init__(self, network_id: Optional[int] = None, config: Optional[SDKConfig] = None) -> None:
        base = config or SDKConfig.from_env()
        if network_id is not None:
            base = SDKConfig.with_overrides(base, network_id=network_id)
        self.config = base

    @property
    def network_id(self) -> int:
        return self.config.network_id

    def create_asset_scheme(
        self, *, metadata: str, amount: Optional[int], registrar: Optional[HashLike] = None
    ) -> AssetScheme:
        """
        Describe a new asset kind on this network.

        `registrar` is a platform account (H160 or hex) or None. When set,
        transfers of the asset must be authorized by that account.
        """
        return AssetScheme(
            network_id=self.network_id,
            metadata=metadata,
            amount=amount,
            registrar=None if registrar is None else H160.ensure(registrar),
        )

    def create_asset_mint_transaction(
        self,
        *,
        metadata: str,
        lock_script_hash: HashLike,
        parameters: Sequence[bytes] = (),
        amount: Optional[int] = None,
        registrar: Optional[HashLike] = None,
    ) -> AssetMintTransaction:
        return AssetMintTransaction(
            metadata=metadata,
            lock_script_hash=H256.ensure(lock_script_hash),
            parameters=tuple(parameters),
            amount=amount,
            registrar=None if registrar is None else H160.ensure(registrar),
        )

    def create_asset_transfer_transaction(
        self,
        *,
        burns: Sequence[AssetTransferInput] = (),
        inputs: Sequence[AssetTransferInput] = (),
        outputs: Sequence[AssetTransferOutput] = (),
    ) -> AssetTransferTransaction:
        return AssetTransferTransaction(
            burns=tuple(burns), inputs=tuple(inputs), outputs=tuple(outputs)
        )

    def create_key_store(self) -> MemoryKeyStore:
        return MemoryKeyStore(self.config)

    def get_transaction_from_json(self, data: Mapping[str, Any]) -> Transaction:
        return transaction_from_json(data)

    def decode_transaction(self, raw: bytes) -> Transaction:
        return decode_transaction(raw)


__all__ = ["Core"]
