"""
codechain_sdk.key.crypto
========================

secp256k1 helpers for the key store (backed by `coincurve`).

Signatures are recoverable ECDSA over a 32-byte digest. The wire framing is

    r (32 bytes, big-endian) || s (32 bytes, big-endian) || v (1 byte, recovery id)

Public keys are the 64-byte uncompressed point without the 0x04 marker (H512).
A 32-byte message (typically a transaction `hash()`) is signed as-is; any
other message is hashed with blake256 first. Hex strings are read as bytes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from coincurve import PrivateKey, PublicKey

from codechain_sdk.errors import ConversionError
from codechain_sdk.primitives import H256, H512, HashLike
from codechain_sdk.utils.bytes import ensure_bytes
from codechain_sdk.utils.hash import blake256

__all__ = [
    "SIGNATURE_LEN",
    "EcdsaSignature",
    "message_digest",
    "generate_private_key",
    "public_from_private",
    "sign_ecdsa",
    "recover_ecdsa",
    "verify_ecdsa",
]

SIGNATURE_LEN = 65

MessageLike = Union[H256, bytes, bytearray, memoryview, str]


@dataclass(frozen=True)
class EcdsaSignature:
    r: int
    s: int
    v: int

    def __post_init__(self) -> None:
        for name in ("r", "s"):
            n = getattr(self, name)
            if isinstance(n, bool) or not isinstance(n, int) or not (0 <= n < 2**256):
                raise ConversionError(f"signature {name} out of range")
        if isinstance(self.v, bool) or not isinstance(self.v, int) or not (0 <= self.v <= 3):
            raise ConversionError("signature recovery id must be in 0..3", v=self.v)

    def to_bytes(self) -> bytes:
        return self.r.to_bytes(32, "big") + self.s.to_bytes(32, "big") + bytes([self.v])

    def to_hex(self) -> str:
        return self.to_bytes().hex()

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview, str]) -> "EcdsaSignature":
        raw = ensure_bytes(data)
        if len(raw) != SIGNATURE_LEN:
            raise ConversionError(
                f"signature must be {SIGNATURE_LEN} bytes", got=len(raw)
            )
        return cls(
            r=int.from_bytes(raw[:32], "big"),
            s=int.from_bytes(raw[32:64], "big"),
            v=raw[64],
        )


def message_digest(message: MessageLike) -> H256:
    """The 32 bytes actually signed for *message*."""
    raw = message.to_bytes() if isinstance(message, H256) else ensure_bytes(message)
    return H256(raw if len(raw) == H256.SIZE else blake256(raw))


def _digest(message: MessageLike) -> bytes:
    return message_digest(message).to_bytes()


def _private(secret: bytes) -> PrivateKey:
    try:
        return PrivateKey(bytes(secret))
    except (TypeError, ValueError) as e:
        raise ConversionError("invalid secp256k1 private key") from e


def generate_private_key() -> bytes:
    """Fresh 32-byte secret scalar from the OS CSPRNG."""
    return PrivateKey().secret


def public_from_private(secret: bytes) -> H512:
    return H512(_private(secret).public_key.format(compressed=False)[1:])


def sign_ecdsa(message: MessageLike, secret: bytes) -> EcdsaSignature:
    sig = _private(secret).sign_recoverable(_digest(message), hasher=None)
    return EcdsaSignature.from_bytes(sig)


def recover_ecdsa(message: MessageLike, signature: Union[EcdsaSignature, bytes, str]) -> H512:
    """Public key that produced *signature* over *message*."""
    sig = signature if isinstance(signature, EcdsaSignature) else EcdsaSignature.from_bytes(signature)
    try:
        pub = PublicKey.from_signature_and_message(sig.to_bytes(), _digest(message), hasher=None)
    except (TypeError, ValueError) as e:
        raise ConversionError("signature does not recover to a public key") from e
    return H512(pub.format(compressed=False)[1:])


def verify_ecdsa(
    message: MessageLike, signature: Union[EcdsaSignature, bytes, str], public_key: HashLike
) -> bool:
    try:
        return recover_ecdsa(message, signature) == H512.ensure(public_key)
    except ConversionError:
        return False
