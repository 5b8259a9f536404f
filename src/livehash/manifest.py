# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Chris Ferebee
"""
manifest.py

Reader for reference manifests in md5sum format: one "<hash> <path>" per line.
Only the bare filename of <path> is used as lookup key.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, Optional

from .errors import ManifestReadError


@dataclass(frozen=True)
class ManifestEntry:
    recorded_path: str
    recorded_hash: str

    @property
    def filename(self) -> str:
        return basename(self.recorded_path)


def basename(recorded_path: str) -> str:
    # manifests written on Windows use backslashes
    return recorded_path.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]


def parse_manifest_line(line: str) -> Optional[ManifestEntry]:
    parts = line.split()
    if len(parts) < 2:
        return None
    digest, name = parts[0], parts[1]
    if name.startswith("*"):  # md5sum binary-mode marker
        name = name[1:]
    if not name:
        return None
    return ManifestEntry(recorded_path=name, recorded_hash=digest.lower())


def iter_manifest(path: Path) -> Iterator[ManifestEntry]:
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                entry = parse_manifest_line(line)
                if entry is not None:
                    yield entry
    except OSError as e:
        raise ManifestReadError(path, e) from e


def load_manifest(path: Path) -> Dict[str, str]:
    """
    Load the reference manifest into a filename -> hash lookup.

    Lines without at least two tokens are skipped. When two entries share a
    filename (even from different directories) the later line wins.
    """
    lookup: Dict[str, str] = {}
    for entry in iter_manifest(path):
        lookup[entry.filename] = entry.recorded_hash
    return lookup
