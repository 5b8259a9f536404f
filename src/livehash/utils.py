# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Chris Ferebee
"""
utils.py

Small, general-purpose utilities for the livehash tool.
"""
import datetime as dt
import os
from pathlib import Path
from typing import Optional

_FALSY = ("", "0", "false", "False", "no", "NO")


def printable(s: str) -> str:
    """Replace undecodable filename bytes (surrogate escapes) so s can be printed."""
    return s.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def log(msg: str):
    ts = dt.datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {printable(msg)}", flush=True)


def env_flag(name: str) -> bool:
    return os.environ.get(name, "0").strip() not in _FALSY


def default_workers() -> int:
    raw = os.environ.get("LH_WORKERS", "").strip()
    if raw:
        try:
            n = int(raw)
        except ValueError:
            log(f"WARNING: ignoring LH_WORKERS={raw!r} (not an integer)")
        else:
            if n > 0:
                return n
    return os.cpu_count() or 4


def default_report_path() -> Path:
    home = os.environ.get("HOME") or "."
    return Path(home) / "live-hash" / "report.txt"


def timestamped_report_path(p: Path, now: Optional[dt.datetime] = None) -> Path:
    """Return p unchanged if it is free, else p with a timestamp appended to its stem."""
    if not p.exists():
        return p
    now = now or dt.datetime.now()
    ts = now.strftime("%Y%m%d_%H-%M-%S")
    return p.parent / f"{p.stem}_{ts}{p.suffix}"
