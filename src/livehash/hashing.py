# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Chris Ferebee
"""
hashing.py

File hashing utilities for the livehash tool.
"""
import hashlib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import ReadError, UnsupportedAlgorithmError

BUF = 1024 * 1024
ERROR_DIGEST = "ERROR"


def check_algo(algo: str) -> str:
    """Normalize algo and make sure hashlib knows it; raises UnsupportedAlgorithmError otherwise."""
    algo = algo.lower()
    try:
        hashlib.new(algo)
    except ValueError:
        raise UnsupportedAlgorithmError(algo) from None
    return algo


def file_digest(path: Path, algo: str = "md5") -> str:
    h = hashlib.new(algo)
    try:
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(BUF), b""):
                h.update(chunk)
    except OSError as e:
        raise ReadError(path, e) from e
    return h.hexdigest()


@dataclass(frozen=True)
class DigestOutcome:
    digest: Optional[str] = None
    error: Optional[ReadError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def display(self) -> str:
        return self.digest if self.ok else ERROR_DIGEST


def compute_digest(path: Path, algo: str = "md5") -> DigestOutcome:
    try:
        return DigestOutcome(digest=file_digest(path, algo))
    except ReadError as e:
        return DigestOutcome(error=e)
