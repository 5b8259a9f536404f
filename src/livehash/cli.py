# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Chris Ferebee
"""
cli.py

Command-line interface for the livehash integrity checker.
"""

import argparse
import sys
import time
from pathlib import Path

from . import __version__
from .core import Verifier
from .errors import LiveHashError, UnsupportedAlgorithmError
from .report_generator import format_summary, write_report
from .utils import default_report_path, default_workers, log, printable, timestamped_report_path


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="livehash",
        description="livehash: Compare live file hashes to a reference md5 file and report differences",
        epilog="Example: livehash --files-path ./restored --md5-file ./known-good.md5 --report-path ./report.txt"
    )
    ap.add_argument("-f", "--files-path", required=True, help="Path to directory containing files to hash.")
    ap.add_argument("-m", "--md5-file", required=True, help="Path to md5 reference file.")
    ap.add_argument("-r", "--report-path", metavar="PATH",
                    help="Path to write the results report (default ~/live-hash/report.txt). "
                         "An existing file is never overwritten; a timestamped name is used instead.")
    ap.add_argument("--workers", type=int, default=None,
                    help="Parallel workers (default: $LH_WORKERS or CPU count).")
    ap.add_argument("--algo", default="md5", help="hashlib algorithm the manifest was written with (default md5).")
    ap.add_argument("--progress-every", type=int, default=1000,
                    help="Log progress every N files, 0 disables (default 1000).")
    ap.add_argument("--version", action="version", version=f"livehash {__version__}")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    start_time = time.time()

    report_path = Path(args.report_path).expanduser() if args.report_path else default_report_path()
    report_path = timestamped_report_path(report_path)
    workers = args.workers if args.workers and args.workers > 0 else default_workers()

    log(f"livehash {__version__} starting up...")
    try:
        verifier = Verifier(Path(args.files_path).expanduser(), Path(args.md5_file).expanduser(),
                            workers=workers, algo=args.algo, progress_every=args.progress_every)
        result = verifier.run()
        summary = write_report(result.results, report_path)
    except (LiveHashError, NotADirectoryError, UnsupportedAlgorithmError) as e:
        print(printable(f"ERROR: {e}"), file=sys.stderr)
        return 2

    print(format_summary(summary))
    log(f"livehash run complete in {time.time() - start_time:0.1f}s "
        f"(PASS: {result.passed}, FAIL: {result.failed})")
    return 0 if result.failed == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
