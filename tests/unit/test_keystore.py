"""
MemoryKeyStore / KeyManager lifecycle, passphrase gate, and namespaces.
"""
from __future__ import annotations

import hashlib

import anyio
import pytest

from codechain_sdk.errors import (AuthenticationError, ConversionError,
                                  KeyNotFound, SdkErrorCode)
from codechain_sdk.key import (KeyManagementAPI, KeyManager, KeyStore,
                               MemoryKeyStore, message_digest, recover_ecdsa)
from codechain_sdk.primitives import H256, H512

pytestmark = pytest.mark.anyio

MSG = H256(hashlib.blake2b(b"transfer 10 gold", digest_size=32).digest())


async def test_create_list_remove(key_store: MemoryKeyStore):
    mgr = key_store.asset
    assert await mgr.list_keys() == []
    k1 = await mgr.create_key()
    k2 = await mgr.create_key(passphrase="pw")
    assert await mgr.list_keys() == [k1, k2]
    assert await mgr.remove_key(key=k1) is True
    assert await mgr.remove_key(key=k1) is False
    assert await mgr.list_keys() == [k2]


async def test_public_key_lookup(key_store: MemoryKeyStore):
    key = await key_store.platform.create_key()
    pub = await key_store.platform.get_public_key(key=key)
    assert isinstance(pub, H512)
    assert await key_store.platform.get_public_key(key="00" * 20) is None


async def test_sign_produces_recoverable_65_bytes(key_store: MemoryKeyStore):
    key = await key_store.asset.create_key(passphrase="secret")
    sig = await key_store.asset.sign(key=key, message=MSG, passphrase="secret")
    assert isinstance(sig, bytes) and len(sig) == 65
    pub = await key_store.asset.get_public_key(key=key)
    assert recover_ecdsa(MSG, sig) == pub


async def test_sign_accepts_hex_and_bytes_digest(key_store: MemoryKeyStore):
    key = await key_store.asset.create_key()
    a = await key_store.asset.sign(key=key, message=MSG)
    b = await key_store.asset.sign(key=key, message=MSG.to_bytes())
    c = await key_store.asset.sign(key=key, message=MSG.to_hex())
    assert a == b == c


async def test_wrong_passphrase_rejected(key_store: MemoryKeyStore):
    key = await key_store.asset.create_key(passphrase="right")
    with pytest.raises(AuthenticationError) as ei:
        await key_store.asset.sign(key=key, message=MSG, passphrase="wrong")
    assert ei.value.code == SdkErrorCode.AUTHENTICATION
    assert ei.value.data["key"] == key
    with pytest.raises(AuthenticationError):
        await key_store.asset.sign(key=key, message=MSG)


async def test_empty_passphrase_is_a_passphrase(key_store: MemoryKeyStore):
    key = await key_store.platform.create_key()
    assert len(await key_store.platform.sign(key=key, message=MSG, passphrase="")) == 65
    with pytest.raises(AuthenticationError):
        await key_store.platform.sign(key=key, message=MSG, passphrase=" ")


async def test_sign_unknown_or_removed_key(key_store: MemoryKeyStore):
    with pytest.raises(KeyNotFound):
        await key_store.asset.sign(key="ff" * 32, message=MSG)
    key = await key_store.asset.create_key()
    await key_store.asset.remove_key(key=key)
    with pytest.raises(AuthenticationError) as ei:
        await key_store.asset.sign(key=key, message=MSG)
    assert ei.value.code == SdkErrorCode.KEY_NOT_FOUND


async def test_sign_hashes_non_digest_message(key_store: MemoryKeyStore):
    key = await key_store.asset.create_key()
    text = b"raw text, not a digest"
    sig = await key_store.asset.sign(key=key, message=text)
    assert len(sig) == 65
    pub = await key_store.asset.get_public_key(key=key)
    assert recover_ecdsa(text, sig) == pub
    assert recover_ecdsa(message_digest(text), sig) == pub
    assert recover_ecdsa(hashlib.blake2b(text, digest_size=32).digest(), sig) == pub

    with pytest.raises(ConversionError):
        await key_store.asset.sign(key=key, message="not hex!")


async def test_namespaces_use_distinct_identifiers(key_store: MemoryKeyStore):
    p = await key_store.platform.create_key()
    a = await key_store.asset.create_key()
    assert len(p) == 40
    assert len(a) == 64

    p_pub = await key_store.platform.get_public_key(key=p)
    a_pub = await key_store.asset.get_public_key(key=a)
    assert p == hashlib.blake2b(p_pub.to_bytes(), digest_size=20).hexdigest()
    assert a == hashlib.blake2b(a_pub.to_bytes(), digest_size=32).hexdigest()

    # namespaces are independent tables
    assert await key_store.asset.get_public_key(key=p) is None
    assert await key_store.platform.remove_key(key=a) is False


async def test_custom_mapping_strategy():
    mgr = KeyManager(lambda pub: "k-" + pub.value[:8], kdf_iters=10)
    key = await mgr.create_key()
    assert key.startswith("k-") and len(key) == 10
    pub = await mgr.get_public_key(key=key)
    assert pub.value[:8] == key[2:]


async def test_concurrent_creates_and_signs(key_store: MemoryKeyStore):
    created: list = []

    async def make() -> None:
        created.append(await key_store.asset.create_key(passphrase="pw"))

    async with anyio.create_task_group() as tg:
        for _ in range(6):
            tg.start_soon(make)

    assert sorted(await key_store.asset.list_keys()) == sorted(created)
    assert len(set(created)) == 6

    sigs: dict = {}

    async def sign(k: str) -> None:
        sigs[k] = await key_store.asset.sign(key=k, message=MSG, passphrase="pw")

    async with anyio.create_task_group() as tg:
        for k in created:
            tg.start_soon(sign, k)

    for k, sig in sigs.items():
        assert recover_ecdsa(MSG, sig) == await key_store.asset.get_public_key(key=k)


async def test_sign_racing_remove_on_same_key(key_store: MemoryKeyStore):
    mgr = key_store.asset
    key = await mgr.create_key(passphrase="pw")
    outcome: list = []

    async def sign() -> None:
        try:
            outcome.append(await mgr.sign(key=key, message=MSG, passphrase="pw"))
        except KeyNotFound as e:
            outcome.append(e)

    async def remove() -> None:
        outcome.append(await mgr.remove_key(key=key))

    async with anyio.create_task_group() as tg:
        tg.start_soon(sign)
        tg.start_soon(remove)

    assert True in outcome
    (result,) = [o for o in outcome if o is not True]
    if isinstance(result, KeyNotFound):
        assert result.code == SdkErrorCode.KEY_NOT_FOUND
    else:
        assert isinstance(result, bytes) and len(result) == 65
    assert await mgr.get_public_key(key=key) is None
    assert key not in await mgr.list_keys()


async def test_create_then_sign_in_one_task(key_store: MemoryKeyStore):
    mgr = key_store.platform
    key = await mgr.create_key(passphrase="pw")
    sig = await mgr.sign(key=key, message=MSG, passphrase="pw")
    assert recover_ecdsa(MSG, sig) == await mgr.get_public_key(key=key)


def test_memory_store_satisfies_protocols(fast_config):
    store: KeyStore = MemoryKeyStore(fast_config)
    platform: KeyManagementAPI = store.platform
    assert platform is not store.asset
    assert store.platform.namespace == "platform"
    assert store.asset.namespace == "asset"


def test_kdf_iters_must_be_positive():
    with pytest.raises(ValueError):
        KeyManager(lambda pub: pub.value, kdf_iters=0)
