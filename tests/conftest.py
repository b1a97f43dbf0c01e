"""
Shared pytest fixtures:
- anyio backend (asyncio only; the key store uses asyncio primitives)
- A config with cheap key sealing so key-store tests stay fast
- A fresh MemoryKeyStore per test
- Canonical sample values (lock script hash, registrar)
"""
from __future__ import annotations

import pytest

from codechain_sdk.config import SDKConfig
from codechain_sdk.key import MemoryKeyStore
from codechain_sdk.primitives import H160, H256


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def fast_config() -> SDKConfig:
    return SDKConfig(network_id=17, kdf_iters=1_000)


@pytest.fixture
def key_store(fast_config: SDKConfig) -> MemoryKeyStore:
    return MemoryKeyStore(fast_config)


@pytest.fixture
def lock_hash() -> H256:
    # 0x00..01
    return H256(bytes(31) + b"\x01")


@pytest.fixture
def registrar() -> H160:
    return H160("0x" + "ab" * 20)
