"""Structured logging for the client layer.

Every logger of the library hangs below the ``ai_access`` logger, which owns
one stderr handler and does not propagate to the application's root logger.
Child loggers (``ai_access.openai``, ``ai_access.diagnostics`` ...) have no
handlers of their own.

Events are single JSON lines::

    {"event": "request.end", "provider": "openai", "endpoint": "...",
     "phase": "finalize", "attempt": null, "emitted": true, "tokens": null,
     "status": 200, "duration_ms": 812.4}

:func:`normalized_log_event` guarantees the keys ``phase``, ``attempt``,
``emitted`` and ``tokens`` (plus ``error_code`` on failures) so request and
chat events of all providers share one shape.

The level is WARNING unless ``AI_ACCESS_LOG_LEVEL`` says otherwise; the
variable is re-read by every :func:`get_logger` call. :func:`configure_logger`
changes level, format and an optional rotating log file at runtime.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Mapping, Optional

from .log_support import JsonFormatter, LogContext

ROOT_LOGGER_NAME = "ai_access"
LOG_LEVEL_ENV = "AI_ACCESS_LOG_LEVEL"

_READY_ATTR = "_ai_access_ready"
_ROLE_ATTR = "_ai_access_role"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
_LOG_FILE_BACKUPS = 5

REQUIRED_NORMALIZED_KEYS = ("phase", "attempt", "error_code", "emitted", "tokens")


def _parse_level(value: Optional[str], default: int = logging.WARNING) -> int:
    """Map a level name (case-insensitive, ``WARN`` accepted) to its number."""
    if not value:
        return default
    name = value.strip().upper()
    if name == "WARN":
        name = "WARNING"
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _managed(logger: logging.Logger, role: str) -> list:
    return [h for h in logger.handlers if getattr(h, _ROLE_ATTR, None) == role]


def _root_logger(json_mode: bool, level: int) -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    wanted = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    if not getattr(logger, _READY_ATTR, False):
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(_formatter(json_mode))
        setattr(console, _ROLE_ATTR, "console")
        logger.handlers[:] = [console]
        logger.propagate = False
        setattr(logger, _READY_ATTR, True)
    if logger.level != wanted:
        logger.setLevel(wanted)
    for handler in _managed(logger, "console"):
        handler.setLevel(wanted)
    return logger


def get_logger(name: str = ROOT_LOGGER_NAME, json_mode: bool = True, level: int = logging.WARNING) -> logging.Logger:
    """Return ``name`` inside the ``ai_access`` hierarchy, initializing it once."""
    root = _root_logger(json_mode, level)
    if name == ROOT_LOGGER_NAME:
        return root
    child = logging.getLogger(name)
    child.setLevel(logging.NOTSET)
    child.propagate = True
    return child


def _drop(logger: logging.Logger, handler: logging.Handler) -> None:
    logger.removeHandler(handler)
    with contextlib.suppress(OSError):
        handler.close()


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the ``ai_access`` logger.

    Parameters
    ----------
    level:
        Numeric level or level name; ``None`` keeps the current level.
    file_path:
        Path of a rotating log file (10 MB, 5 backups). ``None`` detaches the
        file handler added by an earlier call.
    json_mode:
        JSON lines (default) or plain text for the managed handlers.

    Handlers added by the application are never touched.
    """
    logger = get_logger(ROOT_LOGGER_NAME, json_mode=json_mode)
    if isinstance(level, str):
        logger.setLevel(_parse_level(level, default=logger.level))
    elif level is not None:
        logger.setLevel(level)

    for console in _managed(logger, "console"):
        console.setLevel(logger.level)
        console.setFormatter(_formatter(json_mode))

    target = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    keep: Optional[logging.Handler] = None
    for handler in _managed(logger, "file"):
        if target is not None and getattr(handler, "baseFilename", None) == target:
            keep = handler
        else:
            _drop(logger, handler)
    if target is None:
        return logger

    if keep is None:
        os.makedirs(os.path.dirname(target), exist_ok=True)
        keep = RotatingFileHandler(
            target, maxBytes=_LOG_FILE_MAX_BYTES, backupCount=_LOG_FILE_BACKUPS, encoding="utf-8"
        )
        setattr(keep, _ROLE_ATTR, "file")
        logger.addHandler(keep)
    keep.setLevel(logger.level)
    keep.setFormatter(_formatter(json_mode))
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Log ``event`` with ``ctx`` and ``fields`` as one JSON object.

    ``None`` valued fields are dropped unless ``keep_none`` is set.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload.update(ctx.to_dict())
    payload.update(fields if keep_none else {k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


def _tokens_field(tokens: Any) -> Any:
    if tokens is None or isinstance(tokens, Mapping):
        return dict(tokens) if tokens is not None else None
    return {"value": repr(tokens)}


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    level: int = logging.INFO,
    attempt: int | None = None,
    error_code: str | None = None,
    emitted: bool | None = None,
    tokens: Any = None,
    **extra_fields: Any,
) -> None:
    """Log ``event`` carrying the normalized keys.

    ``error_code`` appears only when set. Extra fields cannot replace a
    normalized key that already has a value.
    """
    fields: Dict[str, Any] = {
        "phase": phase,
        "attempt": attempt,
        "emitted": emitted,
        "tokens": _tokens_field(tokens),
    }
    if error_code is not None:
        fields["error_code"] = error_code
    for key, value in extra_fields.items():
        if value is not None and fields.get(key) is None:
            fields[key] = value
    log_event(logger, event, ctx, level=level, keep_none=True, **fields)


__all__ = [
    "LogContext",
    "LOG_LEVEL_ENV",
    "ROOT_LOGGER_NAME",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
