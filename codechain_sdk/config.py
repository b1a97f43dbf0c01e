"""
SDK configuration: network id, key-sealing cost, and logging.

- Sane defaults, overridable via environment variables (CODECHAIN_*).
- Invalid values raise ConfigError naming the offending variable.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import ConfigError

_DEFAULT_NETWORK_ID = 17
_DEFAULT_KDF_ITERS = 100_000
_MIN_KDF_ITERS = 1

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_LOG_FORMATS = ("text", "json")

_HEX_RE = re.compile(r"^0x[0-9a-fA-F]+$")


def _parse_int(val: Any, *, name: str, default: int) -> int:
    """
    Accepts int, decimal str, or 0x-hex str and returns int.
    """
    if val is None or val == "":
        return int(default)
    if isinstance(val, bool):
        raise ConfigError(f"{name} must be an integer", value=val)
    if isinstance(val, int):
        return val
    s = str(val).strip()
    try:
        return int(s, 16) if _HEX_RE.match(s) else int(s, 10)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer", value=s) from e


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    return v if v is not None else default


@dataclass(slots=True)
class SDKConfig:
    network_id: int = _DEFAULT_NETWORK_ID
    # PBKDF2 rounds used to seal each private key under its passphrase
    kdf_iters: int = _DEFAULT_KDF_ITERS
    log_level: str = "INFO"
    log_format: str = "text"

    def __post_init__(self) -> None:
        if isinstance(self.network_id, bool) or not isinstance(self.network_id, int) or self.network_id < 0:
            raise ConfigError("network_id must be a non-negative integer", value=self.network_id)
        if isinstance(self.kdf_iters, bool) or not isinstance(self.kdf_iters, int) or self.kdf_iters < _MIN_KDF_ITERS:
            raise ConfigError("kdf_iters must be a positive integer", value=self.kdf_iters)
        level = str(self.log_level).strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigError("unknown log level", value=self.log_level)
        self.log_level = level
        fmt = str(self.log_format).strip().lower()
        if fmt not in _LOG_FORMATS:
            raise ConfigError("log format must be 'text' or 'json'", value=self.log_format)
        self.log_format = fmt

    @classmethod
    def from_env(cls, prefix: str = "CODECHAIN_") -> "SDKConfig":
        """
        Create config from environment variables:

        CODECHAIN_NETWORK_ID    (int or 0x-hex)
        CODECHAIN_KDF_ITERS     (int)
        CODECHAIN_LOG_LEVEL     (DEBUG|INFO|WARNING|ERROR|CRITICAL)
        CODECHAIN_LOG_FORMAT    (text|json)
        """
        return cls(
            network_id=_parse_int(
                _env(f"{prefix}NETWORK_ID"), name=f"{prefix}NETWORK_ID", default=_DEFAULT_NETWORK_ID
            ),
            kdf_iters=_parse_int(
                _env(f"{prefix}KDF_ITERS"), name=f"{prefix}KDF_ITERS", default=_DEFAULT_KDF_ITERS
            ),
            log_level=_env(f"{prefix}LOG_LEVEL", "INFO") or "INFO",
            log_format=_env(f"{prefix}LOG_FORMAT", "text") or "text",
        )

    @classmethod
    def with_overrides(
        cls, base: Optional["SDKConfig"] = None, **overrides: Any
    ) -> "SDKConfig":
        """
        Build from an existing config plus keyword overrides.
        Unknown keys are ignored.
        """
        base = base or cls.from_env()
        data = base.to_dict()
        data.update({k: v for k, v in overrides.items() if k in data})
        if "network_id" in overrides:
            data["network_id"] = _parse_int(
                overrides["network_id"], name="network_id", default=base.network_id
            )
        if "kdf_iters" in overrides:
            data["kdf_iters"] = _parse_int(
                overrides["kdf_iters"], name="kdf_iters", default=base.kdf_iters
            )
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "network_id": int(self.network_id),
            "kdf_iters": int(self.kdf_iters),
            "log_level": self.log_level,
            "log_format": self.log_format,
        }


__all__ = ["SDKConfig"]
