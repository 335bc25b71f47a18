"""Logging helpers for the resource linter."""

from __future__ import annotations

import os
import sys
from typing import Any

from .utils import now_iso


def _read_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    return normalized in {"1", "true", "yes", "on"}


DEBUG = _read_flag("RESOURCE_LINT_DEBUG", False)
VERBOSE = _read_flag("RESOURCE_LINT_VERBOSE", False)


LOG_FILE = (os.getenv("RESOURCE_LINT_LOG_FILE") or "").strip() or None


def _emit(prefix: str, label: str, payload: Any) -> None:
    timestamp = now_iso()
    message = f"[{prefix}][{timestamp}] {label}: {payload}"
    _write_stderr(message)
    if LOG_FILE:
        _append_log(LOG_FILE, message)


def _write_stderr(message: str) -> None:
    encoding = getattr(sys.stderr, "encoding", None) or "utf-8"
    safe_message = message.encode(encoding, errors="replace").decode(encoding)
    print(safe_message, file=sys.stderr)


def _append_log(path: str, message: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "a", encoding="utf-8") as log_file:
        log_file.write(f"{message}\n")


def set_verbose(enabled: bool) -> None:
    global VERBOSE
    VERBOSE = enabled


def error_log(label: str, payload: Any) -> None:
    """Emit a failure diagnostic regardless of the verbosity flags."""
    _emit("ERROR", label, payload)


def verbose_log(label: str, payload: Any) -> None:
    """Emit structured logs when verbose mode is enabled."""
    if not VERBOSE:
        return
    _emit("VERBOSE", label, payload)


def debug_verbose(label: str, payload: Any) -> None:
    """Emit debug logs when debug mode is active, or always in verbose mode."""
    if not (DEBUG or VERBOSE):
        return
    _emit("DEBUG", label, payload)


__all__ = ["DEBUG", "VERBOSE", "set_verbose", "error_log", "verbose_log", "debug_verbose"]
