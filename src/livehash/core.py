# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Chris Ferebee
"""
core.py

Core logic for the livehash tool: hashes every file under a scan root in a
thread pool, compares each digest against the reference manifest by bare
filename, and aggregates the results.
"""

import concurrent.futures as cf
import enum
import threading
import traceback
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from . import utils
from .discovery import FileEntry, discover_files
from .hashing import DigestOutcome, check_algo, compute_digest
from .manifest import load_manifest


class Status(enum.Enum):
    MATCH = "MATCH"
    FAIL = "FAIL"


@dataclass(frozen=True)
class Mismatch:
    filename: str
    live: str
    ref: str


@dataclass(frozen=True)
class FileResult:
    rel_path: str
    filename: str
    outcome: DigestOutcome
    reference: Optional[str]
    status: Status

    @property
    def live(self) -> str:
        return self.outcome.display

    @property
    def mismatch(self) -> Optional[Mismatch]:
        # no reference hash means nothing to show against
        if self.status is Status.MATCH or self.reference is None:
            return None
        return Mismatch(self.filename, self.live, self.reference)


def classify(filename: str, outcome: DigestOutcome, lookup: Dict[str, str]) -> Tuple[Status, Optional[str]]:
    ref = lookup.get(filename)
    if outcome.ok and ref is not None and ref == outcome.digest:
        return Status.MATCH, ref
    return Status.FAIL, ref


class Tally:
    """
    Pass/fail counters plus the live-hash collection, behind a single lock.

    Every worker goes through record(); nothing else mutates the state, so
    counters and map can never disagree.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._results: Dict[str, FileResult] = {}
        self.passed = 0
        self.failed = 0

    def record(self, result: FileResult) -> Tuple[int, int, int]:
        with self._lock:
            if result.rel_path in self._results:
                raise ValueError(f"file recorded twice: {result.rel_path}")
            self._results[result.rel_path] = result
            if result.status is Status.MATCH:
                self.passed += 1
            else:
                self.failed += 1
            return self.passed + self.failed, self.passed, self.failed

    @property
    def processed(self) -> int:
        with self._lock:
            return self.passed + self.failed

    def results(self) -> List[FileResult]:
        with self._lock:
            return [self._results[k] for k in sorted(self._results)]

    def live_hashes(self) -> Dict[str, str]:
        with self._lock:
            return {k: r.live for k, r in self._results.items()}


def verify_entries(entries: Iterable[FileEntry], lookup: Dict[str, str], workers: int = 4,
                   algo: str = "md5", progress_every: int = 0) -> Tally:
    """Hash and classify every entry concurrently. Returns once all of them are recorded."""
    entries = list(entries)
    total = len(entries)
    tally = Tally()
    trace = utils.env_flag("LH_TRACE")

    def worker(entry: FileEntry):
        outcome = compute_digest(entry.path, algo)
        if not outcome.ok:
            err = outcome.error
            msg = f"ERROR hashing file: {entry.path} :: {err}"
            if trace:
                tb = "".join(traceback.format_exception(type(err), err, err.__traceback__, limit=6))
                utils.log(msg + "\n" + tb)
            else:
                utils.log(msg)
        filename = entry.filename
        status, ref = classify(filename, outcome, lookup)
        processed, passed, failed = tally.record(
            FileResult(entry.rel_path, filename, outcome, ref, status))
        if progress_every and (processed % progress_every == 0 or processed == total):
            utils.log(f"{processed}/{total} files | PASS: {passed}    FAIL: {failed}")

    with cf.ThreadPoolExecutor(max_workers=max(1, workers)) as ex:
        list(ex.map(worker, entries))
    return tally


@dataclass
class VerifyResult:
    total: int
    passed: int
    failed: int
    results: List[FileResult]

    @property
    def mismatches(self) -> List[Mismatch]:
        return [r.mismatch for r in self.results if r.mismatch is not None]


class Verifier:
    def __init__(self, root: Path, manifest_path: Path, workers: int = 4,
                 algo: str = "md5", progress_every: int = 1000):
        self.root = Path(root)
        self.manifest_path = Path(manifest_path)
        self.workers = workers
        self.algo = check_algo(algo)
        self.progress_every = progress_every

    def run(self) -> VerifyResult:
        # manifest first: without a reference there is nothing worth hashing
        utils.log(f"Loading reference manifest {self.manifest_path}...")
        lookup = load_manifest(self.manifest_path)
        utils.log(f"Manifest lists {len(lookup)} filenames")

        utils.log("Discovering files...")
        files = discover_files(self.root)
        utils.log(f"Found {len(files)} files, hashing with {self.workers} workers ({self.algo})")

        tally = verify_entries(files, lookup, self.workers, self.algo, self.progress_every)
        utils.log("Hashing complete")
        return VerifyResult(total=len(files), passed=tally.passed, failed=tally.failed,
                            results=tally.results())
