"""
CodeChain SDK for Python
Transaction canonicalization, asset address derivation and key custody.
"""

from .version import __version__  # noqa: F401

# Config & errors
from .config import SDKConfig  # noqa: F401
from .errors import (  # noqa: F401
    CodeChainSdkError,
    ConversionError,
    MalformedInputError,
    EncodingError,
    AuthenticationError,
    KeyNotFound,
    ConfigError,
)

# Primitives
from .primitives import H160, H256, H512, U256  # noqa: F401

# Transactions
from .tx import (  # noqa: F401
    AssetMintTransaction,
    AssetTransferTransaction,
    AssetOutPoint,
    AssetTransferInput,
    AssetTransferOutput,
    decode_transaction,
    transaction_from_json,
)
from .types import Asset, AssetScheme  # noqa: F401

# Keys
from .key import MemoryKeyStore, KeyManager  # noqa: F401

from .core import Core  # noqa: F401

__all__ = [
    "__version__",
    # Core
    "Core",
    "SDKConfig",
    "CodeChainSdkError", "ConversionError", "MalformedInputError", "EncodingError",
    "AuthenticationError", "KeyNotFound", "ConfigError",
    # Primitives
    "H160", "H256", "H512", "U256",
    # Transactions
    "AssetMintTransaction", "AssetTransferTransaction",
    "AssetOutPoint", "AssetTransferInput", "AssetTransferOutput",
    "decode_transaction", "transaction_from_json",
    "Asset", "AssetScheme",
    # Keys
    "MemoryKeyStore", "KeyManager",
]
