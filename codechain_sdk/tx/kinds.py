from __future__ import annotations

from enum import IntEnum


class TxType(IntEnum):
    """Leading integer of every encoded transaction."""

    ASSET_MINT = 3
    ASSET_TRANSFER = 4


# JSON "type" tags
JSON_TAGS = {
    TxType.ASSET_MINT: "assetMint",
    TxType.ASSET_TRANSFER: "assetTransfer",
}

__all__ = ["TxType", "JSON_TAGS"]
