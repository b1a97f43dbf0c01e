"""
Ledger value objects that are not transactions themselves.
"""

from .asset import Asset
from .asset_scheme import AssetScheme

__all__ = ["Asset", "AssetScheme"]
