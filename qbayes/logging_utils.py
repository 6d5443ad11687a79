# qbayes/logging_utils.py

from __future__ import annotations

import sys
from datetime import datetime

_VERBOSE = False


def set_verbose(enabled: bool = True) -> None:
    """Turn step messages on or off (warnings and errors always print)."""
    global _VERBOSE
    _VERBOSE = bool(enabled)


def is_verbose() -> bool:
    return _VERBOSE


def qstep(msg: str) -> None:
    if not _VERBOSE:
        return
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] ⧉ QBAYES: {msg}")


def qwarn(msg: str) -> None:
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] ⚠️ QBAYES WARN: {msg}")


def qerr(msg: str) -> None:
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] ❌ QBAYES ERROR: {msg}", file=sys.stderr)
