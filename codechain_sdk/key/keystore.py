"""
codechain_sdk.key.keystore
==========================

In-memory, passphrase-gated key custody.

Design
------
- A `KeyManager` is one namespace of keys. Keys are addressed by an
  identifier computed from the public key by an injected `key_mapper`;
  the manager never hands out the private scalar.
- Each private key is sealed at rest (in memory) with AES-256-GCM under a
  key derived from its passphrase via PBKDF2-HMAC-SHA3-256, with a fresh
  salt and nonce per key. The public key is bound as associated data.
  Opening the seal is the passphrase check: a wrong passphrase fails GCM
  authentication and surfaces as `AuthenticationError`.
- `MemoryKeyStore` bundles two independent namespaces:
    platform → identifier = blake160(pub)  (account id, 40 hex chars)
    asset    → identifier = blake256(pub)  (64 hex chars)
- PBKDF2 runs in a worker thread so the event loop stays responsive.
  Table updates and lookups are serialized by an `asyncio.Lock`.

Signatures are 65 bytes: r (32) || s (32) || v (1).
"""

from __future__ import annotations

import asyncio
import hashlib
import secrets
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Protocol

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from codechain_sdk.address import (account_id_from_public,
                                   asset_key_id_from_public)
from codechain_sdk.config import SDKConfig
from codechain_sdk.errors import AuthenticationError, KeyNotFound
from codechain_sdk.logging import get_logger
from codechain_sdk.primitives import H256, H512

from .crypto import (MessageLike, generate_private_key, message_digest,
                     public_from_private, sign_ecdsa)

__all__ = [
    "KeyMapper",
    "KeyManagementAPI",
    "KeyStore",
    "KeyManager",
    "MemoryKeyStore",
    "platform_key_id",
    "asset_key_id",
]

log = get_logger(__name__)

KeyMapper = Callable[[H512], str]

_SALT_LEN = 16
_NONCE_LEN = 12


# ----- Contracts ---------------------------------------------------------------


class KeyManagementAPI(Protocol):
    async def list_keys(self) -> List[str]: ...

    async def create_key(self, *, passphrase: str = "") -> str: ...

    async def remove_key(self, *, key: str) -> bool: ...

    async def get_public_key(self, *, key: str) -> Optional[H512]: ...

    async def sign(self, *, key: str, message: MessageLike, passphrase: str = "") -> bytes: ...


class KeyStore(Protocol):
    platform: KeyManagementAPI
    asset: KeyManagementAPI


# ----- Identifier mappings -----------------------------------------------------


def platform_key_id(public_key: H512) -> str:
    return account_id_from_public(public_key).value


def asset_key_id(public_key: H512) -> str:
    return asset_key_id_from_public(public_key).value


# ----- Sealing -----------------------------------------------------------------


@dataclass(frozen=True)
class _SealedKey:
    public_key: H512
    salt: bytes
    nonce: bytes
    ciphertext: bytes  # includes the GCM tag
    kdf_iters: int


def _pbkdf2_sha3(passphrase: str, salt: bytes, iters: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha3_256", passphrase.encode("utf-8"), salt, iters, dklen=32)


def _seal(secret: bytes, public_key: H512, passphrase: str, iters: int) -> _SealedKey:
    salt = secrets.token_bytes(_SALT_LEN)
    nonce = secrets.token_bytes(_NONCE_LEN)
    aes = AESGCM(_pbkdf2_sha3(passphrase, salt, iters))
    return _SealedKey(
        public_key=public_key,
        salt=salt,
        nonce=nonce,
        ciphertext=aes.encrypt(nonce, secret, public_key.to_bytes()),
        kdf_iters=iters,
    )


def _open(sealed: _SealedKey, passphrase: str) -> bytes:
    aes = AESGCM(_pbkdf2_sha3(passphrase, sealed.salt, sealed.kdf_iters))
    try:
        return aes.decrypt(sealed.nonce, sealed.ciphertext, sealed.public_key.to_bytes())
    except InvalidTag as e:
        raise AuthenticationError() from e


def _create(passphrase: str, iters: int) -> _SealedKey:
    secret = generate_private_key()
    return _seal(secret, public_from_private(secret), passphrase, iters)


def _sign(sealed: _SealedKey, digest: H256, passphrase: str) -> bytes:
    return sign_ecdsa(digest, _open(sealed, passphrase)).to_bytes()


def _passphrase(value: Optional[str]) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError("passphrase must be str")
    return value


# ----- KeyManager --------------------------------------------------------------


class KeyManager:
    """
    One namespace of custodied secp256k1 keys.

    Parameters
    ----------
    key_mapper : Callable[[H512], str]
        Computes the external identifier of a key from its public key.
    kdf_iters : int
        PBKDF2 rounds for sealing new keys.
    namespace : str
        Label used in log records.
    """

    def __init__(
        self, key_mapper: KeyMapper, *, kdf_iters: int = 100_000, namespace: str = "keys"
    ) -> None:
        if kdf_iters < 1:
            raise ValueError("kdf_iters must be positive")
        self._key_mapper = key_mapper
        self._kdf_iters = int(kdf_iters)
        self._namespace = namespace
        self._keys: Dict[str, _SealedKey] = {}
        self._lock = asyncio.Lock()

    @property
    def namespace(self) -> str:
        return self._namespace

    async def list_keys(self) -> List[str]:
        """Identifiers of all held keys, in creation order."""
        async with self._lock:
            return list(self._keys)

    async def create_key(self, *, passphrase: str = "") -> str:
        pw = _passphrase(passphrase)
        sealed = await asyncio.to_thread(_create, pw, self._kdf_iters)
        key = self._key_mapper(sealed.public_key)
        async with self._lock:
            self._keys[key] = sealed
        log.info("key created", extra={"namespace": self._namespace, "key": key})
        return key

    async def remove_key(self, *, key: str) -> bool:
        async with self._lock:
            removed = self._keys.pop(key, None) is not None
        if removed:
            log.info("key removed", extra={"namespace": self._namespace, "key": key})
        return removed

    async def get_public_key(self, *, key: str) -> Optional[H512]:
        async with self._lock:
            sealed = self._keys.get(key)
        return None if sealed is None else sealed.public_key

    async def sign(self, *, key: str, message: MessageLike, passphrase: str = "") -> bytes:
        """
        Sign *message* with the key named *key*.

        A 32-byte message (a transaction hash) is signed directly; any other
        bytes or hex message is signed over its blake256 digest.

        Raises
        ------
        ConversionError       message is neither bytes nor a hex string
        KeyNotFound           no key with this identifier
        AuthenticationError   passphrase does not open the key
        """
        digest = message_digest(message)
        pw = _passphrase(passphrase)
        async with self._lock:
            sealed = self._keys.get(key)
        if sealed is None:
            log.warning("sign rejected: unknown key", extra={"namespace": self._namespace, "key": key})
            raise KeyNotFound(key)
        try:
            signature = await asyncio.to_thread(_sign, sealed, digest, pw)
        except AuthenticationError as e:
            log.warning("sign rejected: passphrase mismatch", extra={"namespace": self._namespace, "key": key})
            raise e.with_context(key=key) from e
        log.debug("message signed", extra={"namespace": self._namespace, "key": key})
        return signature


# ----- MemoryKeyStore ----------------------------------------------------------


class MemoryKeyStore:
    """Two independent in-memory namespaces: platform accounts and asset keys."""

    def __init__(self, config: Optional[SDKConfig] = None) -> None:
        cfg = config or SDKConfig.from_env()
        self.platform = KeyManager(platform_key_id, kdf_iters=cfg.kdf_iters, namespace="platform")
        self.asset = KeyManager(asset_key_id, kdf_iters=cfg.kdf_iters, namespace="asset")
