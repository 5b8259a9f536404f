# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Chris Ferebee
"""
discovery.py

Recursive enumeration of the regular files under a scan root.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class FileEntry:
    path: Path
    rel_path: str

    @property
    def filename(self) -> str:
        return self.path.name


def discover_files(root: Path) -> List[FileEntry]:
    root = Path(root)
    if not root.is_dir():
        raise NotADirectoryError(f"scan root is not a directory: {root}")
    entries = []
    for dirpath, dirnames, filenames in os.walk(root):
        for name in filenames:
            p = Path(dirpath) / name
            try:
                if p.is_symlink() or not p.is_file():
                    continue
            except OSError:
                continue
            entries.append(FileEntry(path=p, rel_path=p.relative_to(root).as_posix()))
    return entries
