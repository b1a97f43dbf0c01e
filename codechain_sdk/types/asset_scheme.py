from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Sequence

from codechain_sdk.primitives import H160, HashLike
from codechain_sdk.utils import fields as f

if TYPE_CHECKING:  # pragma: no cover
    from codechain_sdk.tx.mint import AssetMintTransaction


@dataclass(frozen=True)
class AssetScheme:
    """
    Description of an asset kind.

    `amount` is the supply cap (None means uncapped). When `registrar` is
    set, only that platform account may authorize transfers of assets of
    this scheme.
    """

    network_id: int
    metadata: str
    amount: Optional[int] = None
    registrar: Optional[H160] = None

    def __post_init__(self) -> None:
        if isinstance(self.network_id, bool) or not isinstance(self.network_id, int):
            raise TypeError("AssetScheme.network_id must be int")
        if self.network_id < 0:
            raise ValueError("AssetScheme.network_id must be ≥ 0")
        if not isinstance(self.metadata, str):
            raise TypeError("AssetScheme.metadata must be str")
        if self.amount is not None:
            object.__setattr__(self, "amount", f.check_amount(self.amount))
        if self.registrar is not None:
            object.__setattr__(self, "registrar", H160.ensure(self.registrar))

    def create_mint_transaction(
        self, *, lock_script_hash: HashLike, parameters: Sequence[bytes] = ()
    ) -> "AssetMintTransaction":
        """The mint that brings this scheme onto the ledger for the given lock script."""
        from codechain_sdk.tx.mint import AssetMintTransaction

        return AssetMintTransaction(
            metadata=self.metadata,
            lock_script_hash=lock_script_hash,
            parameters=tuple(parameters),
            amount=self.amount,
            registrar=self.registrar,
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "networkId": self.network_id,
            "metadata": self.metadata,
            "amount": self.amount,
            "registrar": None if self.registrar is None else self.registrar.value,
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AssetScheme":
        owner = "AssetScheme"
        data = f.expect_record(data, owner=owner)
        amount = f.optional(data, "amount")
        registrar = f.optional(data, "registrar")
        return cls(
            network_id=f.read_index(data, "networkId", owner=owner),
            metadata=f.read_str(data, "metadata", owner=owner),
            amount=None if amount is None else f.check_amount(amount),
            registrar=None if registrar is None else H160(registrar),
        )


__all__ = ["AssetScheme"]
