# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Chris Ferebee
"""
report_generator.py

Writes the tab-separated comparison report and builds the console summary.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from .core import FileResult, Mismatch, Status
from .errors import ReportWriteError
from .utils import printable

BANNER = "=" * 20


@dataclass
class ReportSummary:
    report_path: Path
    total: int = 0
    passed: int = 0
    failed: int = 0
    mismatches: List[Mismatch] = field(default_factory=list)


def report_line(result: FileResult) -> str:
    return f"{result.filename}\t{result.live}\t{result.status.value}\n"


def write_report(results: Iterable[FileResult], output_path: Path) -> ReportSummary:
    """
    Write one "filename<TAB>hash<TAB>MATCH|FAIL" line per result, in the order
    given, creating parent directories as needed.
    """
    output_path = Path(output_path)
    summary = ReportSummary(report_path=output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        # surrogateescape writes undecodable filename bytes back out unchanged
        with open(output_path, "w", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
            for r in results:
                f.write(report_line(r))
                summary.total += 1
                if r.status is Status.MATCH:
                    summary.passed += 1
                else:
                    summary.failed += 1
                    if r.mismatch is not None:
                        summary.mismatches.append(r.mismatch)
    except OSError as e:
        raise ReportWriteError(output_path, e) from e
    return summary


def format_summary(summary: ReportSummary) -> str:
    lines = []
    if not summary.mismatches:
        lines += ["", BANNER, f"{summary.total} files checked, no mismatches found."]
        if summary.failed:
            # files without a reference entry fail but have nothing to list
            lines.append(f"FAIL count: {summary.failed} (no reference entry)")
        else:
            lines.append("All good.")
        lines.append("")
    else:
        lines.append("Mismatched files:")
        for m in summary.mismatches:
            lines += [printable(m.filename), f"  live: {m.live}", f"  ref:  {m.ref}"]
        lines.append(f"FAIL count: {summary.failed}")
    lines.append(printable(f"report written to {summary.report_path}"))
    return "\n".join(lines)
