# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Chris Ferebee
"""
errors.py

Exception types for the livehash tool.
"""
from pathlib import Path
from typing import Optional


class LiveHashError(Exception):
    """Base class; carries the path that failed and the underlying cause."""

    what = "path"

    def __init__(self, path, cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.cause = cause
        super().__init__(str(self))

    def __str__(self):
        msg = f"cannot access {self.what} {self.path}"
        if self.cause is not None:
            reason = getattr(self.cause, "strerror", None) or str(self.cause)
            msg += f": {reason}"
        return msg


class ReadError(LiveHashError):
    """A single file could not be opened or read. Never fatal to a run."""
    what = "file"


class ManifestReadError(LiveHashError):
    what = "reference manifest"


class ReportWriteError(LiveHashError):
    what = "report"


class UnsupportedAlgorithmError(ValueError):
    def __init__(self, algo: str):
        self.algo = algo
        super().__init__(f"unsupported hash algorithm: {algo}")
