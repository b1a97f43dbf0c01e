"""
codechain_sdk.errors
--------------------

Typed error classes for the SDK.

Design goals
------------
- One root `CodeChainSdkError` with a machine-friendly `code` and optional `data`.
- Concrete subclasses for each failure the core can surface: primitive
  conversion, malformed transaction input, encoding, and the signing
  passphrase gate.
- Safe JSON representation (`to_dict`) suitable for logs and RPC bridges.
- "Not found" is *not* an error here: key-store lookups answer `False`/`None`.

Every failure is local to the operation that raised it; no error in this
package leaves shared state half-applied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping

__all__ = [
    "SdkErrorCode",
    "CodeChainSdkError",
    "ConversionError",
    "MalformedInputError",
    "EncodingError",
    "AuthenticationError",
    "KeyNotFound",
    "ConfigError",
]


class SdkErrorCode(str, Enum):
    CONVERSION = "SDK/CONVERSION"
    MALFORMED_INPUT = "SDK/MALFORMED_INPUT"
    ENCODING = "SDK/ENCODING"
    AUTHENTICATION = "SDK/AUTHENTICATION"
    KEY_NOT_FOUND = "SDK/KEY_NOT_FOUND"
    CONFIG = "SDK/CONFIG"


@dataclass(eq=False)
class CodeChainSdkError(Exception):
    """
    Root error for the SDK.

    Attributes
    ----------
    code: str
        Machine-stable error code (see SdkErrorCode).
    message: str
        Human hint suitable for logs; never carries key material or passphrases.
    data: dict
        Optional machine data (field names, lengths, identifiers). JSON-serializable.
    retryable: bool
        Whether the same call may succeed without changing its inputs.
    """

    code: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)
    retryable: bool = False

    def __post_init__(self) -> None:
        super().__init__(f"{_code_str(self.code)}: {self.message}")

    def with_context(self, **ctx: Any) -> "CodeChainSdkError":
        """Return a copy with extra context merged into `data`."""
        out = Exception.__new__(type(self))
        out.__dict__.update(self.__dict__)
        Exception.__init__(out, *self.args)
        out.data = {**self.data, **_jsonmap(ctx)}
        return out

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": _code_str(self.code),
            "message": self.message,
            "data": _jsonmap(self.data),
            "retryable": self.retryable,
        }

    def __str__(self) -> str:  # pragma: no cover - human formatting
        code = _code_str(self.code)
        if not self.data:
            return f"{code}: {self.message}"
        preview = ", ".join(f"{k}={_preview(v)}" for k, v in self.data.items())
        return f"{code}: {self.message} [{preview}]"


class ConversionError(CodeChainSdkError):
    """Malformed hex, wrong byte length or out-of-range number for a primitive type."""

    def __init__(self, message: str = "conversion failed", **data: Any) -> None:
        super().__init__(code=SdkErrorCode.CONVERSION, message=message, data=_jsonmap(data))


class MalformedInputError(CodeChainSdkError):
    """A loosely-typed record could not be turned into a transaction."""

    def __init__(self, message: str = "malformed input", **data: Any) -> None:
        super().__init__(
            code=SdkErrorCode.MALFORMED_INPUT, message=message, data=_jsonmap(data)
        )


class EncodingError(CodeChainSdkError):
    def __init__(self, message: str = "encoding failed", **data: Any) -> None:
        super().__init__(code=SdkErrorCode.ENCODING, message=message, data=_jsonmap(data))


class AuthenticationError(CodeChainSdkError):
    """
    The signing passphrase did not open the stored key.

    Callers may retry with a corrected passphrase; the store never retries.
    """

    def __init__(self, message: str = "the passphrase does not match", **data: Any) -> None:
        super().__init__(
            code=SdkErrorCode.AUTHENTICATION, message=message, data=_jsonmap(data)
        )


class KeyNotFound(AuthenticationError):
    """Signing was requested for an identifier the store does not hold."""

    def __init__(self, key: str) -> None:
        CodeChainSdkError.__init__(
            self, code=SdkErrorCode.KEY_NOT_FOUND, message="unknown key", data=_jsonmap({"key": key})
        )


class ConfigError(CodeChainSdkError):
    def __init__(self, message: str = "invalid configuration", **data: Any) -> None:
        super().__init__(code=SdkErrorCode.CONFIG, message=message, data=_jsonmap(data))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _code_str(code: Any) -> str:
    return code.value if isinstance(code, Enum) else str(code)


def _jsonmap(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: _coerce_json(v) for k, v in data.items()}


def _coerce_json(v: Any) -> Any:
    if v is None or isinstance(v, (bool, int, float, str, list, dict)):
        return v
    if isinstance(v, (bytes, bytearray)):
        return bytes(v).hex()
    return str(v)


def _preview(v: Any, limit: int = 96) -> str:
    s = str(_coerce_json(v))
    return s if len(s) <= limit else s[:limit] + "…"

