"""
codechain_sdk.logging
---------------------

Structured logging for the SDK on top of stdlib `logging`:
- JSON or one-line text output
- Context-local fields via `contextvars` (trace_id, network_id, component, namespace)
- Safe coercion of bytes and fixed-width hashes to hex

The library never configures handlers on import. Applications call
`configure()` once (or `configure_from_config(SDKConfig.from_env())`).

    from codechain_sdk import logging as clog

    clog.configure(json=False, level="DEBUG")
    log = clog.get_logger(__name__)

    with clog.trace_scope():
        clog.bind(component="wallet")
        log.info("key created", extra={"key": key})

Key material and passphrases must never be passed as log fields; the key
store logs identifiers only.
"""

from __future__ import annotations

import datetime as _dt
import io
import json
import logging
import os
import sys
import traceback
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, Optional

_LOG_CONTEXT: ContextVar[Dict[str, Any]] = ContextVar("_CODECHAIN_LOG_CONTEXT", default={})

DEFAULT_CONTEXT_KEYS = ("trace_id", "network_id", "component", "namespace")

ROOT_LOGGER = "codechain_sdk"

# attributes every LogRecord carries; anything else came in through `extra=`
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "taskName"}


# ----------------------------
# Context
# ----------------------------


def context() -> Dict[str, Any]:
    """Return a copy of the active logging context."""
    return dict(_LOG_CONTEXT.get())


def bind(**fields: Any) -> None:
    cur = dict(_LOG_CONTEXT.get())
    cur.update({k: _coerce_value(v) for k, v in fields.items()})
    _LOG_CONTEXT.set(cur)


def unbind(*keys: str) -> None:
    cur = dict(_LOG_CONTEXT.get())
    for k in keys:
        cur.pop(k, None)
    _LOG_CONTEXT.set(cur)


def clear_context() -> None:
    _LOG_CONTEXT.set({})


@contextmanager
def trace_scope(trace_id: Optional[str] = None) -> Iterator[str]:
    """
    Ensure a trace_id for the duration of the scope and restore the prior
    context on exit. Yields the trace id in effect.
    """
    prev = dict(_LOG_CONTEXT.get())
    tid = trace_id or short_uuid()
    try:
        bind(trace_id=tid)
        yield tid
    finally:
        _LOG_CONTEXT.set(prev)


def short_uuid() -> str:
    return uuid.uuid4().hex[:12]


# ----------------------------
# Formatters
# ----------------------------


def _coerce_value(v: Any) -> Any:
    if v is None or isinstance(v, (bool, int, float, str, list, dict)):
        return v
    if isinstance(v, (bytes, bytearray, memoryview)):
        return bytes(v).hex()
    if isinstance(v, _dt.datetime):
        if v.tzinfo is None:
            v = v.replace(tzinfo=_dt.timezone.utc)
        return v.isoformat()
    # H160/H256/H512 and U256 render as their canonical text
    return str(v)


def _utcnow_iso() -> str:
    return _dt.datetime.now(_dt.timezone.utc).isoformat(timespec="milliseconds")


def _extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        k: _coerce_value(v)
        for k, v in record.__dict__.items()
        if not k.startswith("_") and k not in _RECORD_ATTRS
    }


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": _utcnow_iso(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update({k: _coerce_value(v) for k, v in context().items()})
        for k, v in _extras(record).items():
            payload.setdefault(k, v)
        if record.exc_info:
            payload["err"] = "".join(traceback.format_exception(*record.exc_info)).rstrip()
        return json.dumps(payload, separators=(",", ":"), default=str)


class TextFormatter(logging.Formatter):
    """
    One line per record:
      2026-01-05T12:34:56.789+00:00 | INFO  | codechain_sdk.key | namespace=asset | key=ab12.. | key created
    """

    def format(self, record: logging.LogRecord) -> str:
        ctx = context()
        ctx_str = " ".join(f"{k}={ctx[k]}" for k in DEFAULT_CONTEXT_KEYS if ctx.get(k) is not None)
        extras = " ".join(
            f"{k}={v}" for k, v in _extras(record).items() if k not in ctx
        )

        line = f"{_utcnow_iso()} | {record.levelname:<5} | {record.name}"
        if ctx_str:
            line += f" | {ctx_str}"
        if extras:
            line += f" | {extras}"
        line += f" | {record.getMessage()}"
        if record.exc_info:
            line += "\n" + "".join(traceback.format_exception(*record.exc_info)).rstrip()
        return line


# ----------------------------
# Setup
# ----------------------------


def configure(
    *,
    json: Optional[bool] = None,
    level: str | int = "INFO",
    stream: io.TextIOBase = sys.stderr,
) -> logging.Logger:
    """
    Attach a single console handler to the `codechain_sdk` logger.

    json=None picks the format from CODECHAIN_LOG_FORMAT (json|text), text by default.
    Calling again replaces the handler installed by the previous call.
    """
    lvl = _coerce_level(level)
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(lvl)
    for h in list(logger.handlers):
        if getattr(h, "_codechain_handler", False):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream)
    handler.setLevel(lvl)
    handler.setFormatter(JSONFormatter() if _decide_json(json) else TextFormatter())
    handler._codechain_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


def configure_from_config(cfg: Any) -> logging.Logger:
    """Configure from an `SDKConfig` (log_level, log_format, network_id)."""
    bind(network_id=getattr(cfg, "network_id", None))
    return configure(json=cfg.log_format == "json", level=cfg.log_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the `codechain_sdk` hierarchy."""
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


# ----------------------------
# Internals
# ----------------------------


def _coerce_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    lvl = logging.getLevelName(level.strip().upper())
    return lvl if isinstance(lvl, int) else logging.INFO


def _decide_json(json_flag: Optional[bool]) -> bool:
    if json_flag is not None:
        return json_flag
    return os.environ.get("CODECHAIN_LOG_FORMAT", "").strip().lower() == "json"


logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_CONTEXT_KEYS",
    "context",
    "bind",
    "unbind",
    "clear_context",
    "trace_scope",
    "short_uuid",
    "JSONFormatter",
    "TextFormatter",
    "configure",
    "configure_from_config",
    "get_logger",
]
