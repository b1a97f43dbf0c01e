"""
Key custody: passphrase-gated secp256k1 key managers and signing helpers.
"""

from .crypto import (EcdsaSignature, generate_private_key, message_digest,
                     public_from_private, recover_ecdsa, sign_ecdsa,
                     verify_ecdsa)
from .keystore import (KeyManagementAPI, KeyManager, KeyStore, MemoryKeyStore,
                       asset_key_id, platform_key_id)

__all__ = [
    "EcdsaSignature",
    "message_digest",
    "generate_private_key",
    "public_from_private",
    "sign_ecdsa",
    "recover_ecdsa",
    "verify_ecdsa",
    "KeyManagementAPI",
    "KeyStore",
    "KeyManager",
    "MemoryKeyStore",
    "platform_key_id",
    "asset_key_id",
]
