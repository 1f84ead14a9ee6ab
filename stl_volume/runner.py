"""
STL Volume Runner Module

Command-line tool that loads STL files and prints their volume:

    stl-volume part.stl [other.stl ...]

Each mesh is also measured after a translation; a closed mesh gives the same
volume, so a mismatch is reported as "not very manifold". Loader diagnostics
are written to stderr.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

from . import config
from .core.stl_utils import load_stl
from .core.volume import check_manifold
from .logging_config import setup_logging

USAGE = (
    "Usage: stl-volume foo.stl [ bar.stl ... ]\n"
    "    Prints the volume in mm^3 and cm^3 of these STLs."
)


@dataclass
class FileReport:
    """Measurement of one STL file."""

    path: str
    n_triangles: int
    volume: float
    shifted_volume: float
    is_manifold: bool

    def summary(self) -> str:
        if not self.is_manifold:
            return f"{self.path}: not very manifold ({self.volume:.3f} vs {self.shifted_volume:.3f})"
        return f"{self.path}: {self.n_triangles} triangles, volume {self.volume:.3f} "


def measure_file(path: str) -> FileReport:
    """Load ``path`` and measure its volume and translation invariance."""
    mesh = load_stl(path).mesh
    check = check_manifold(mesh)
    return FileReport(
        path=path,
        n_triangles=len(mesh),
        volume=check.volume,
        shifted_volume=check.shifted_volume,
        is_manifold=check.is_manifold,
    )


def format_total(total: float) -> str:
    return (f"Total volume: {total:.3f} cubic <units>, "
            f"{total / config.MM3_PER_CC:.3f} cc (if units==mm)")


def run(paths: Sequence[str]) -> List[FileReport]:
    """Measure each file in turn, printing one line per file and the total."""
    reports = []
    total = 0.0
    for path in paths:
        report = measure_file(path)
        print(report.summary(), flush=True)
        total += abs(report.volume)
        reports.append(report)
    print(format_total(total))
    return reports


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="stl-volume",
        description="Print the volume of STL files",
    )
    parser.add_argument("files", nargs="*", help="STL files to measure")
    if argv is None:
        argv = sys.argv[1:]
    # No options: every argument is a file, even one starting with "-"
    args = parser.parse_args(["--", *argv])

    if not args.files:
        print(USAGE)
        return 1

    setup_logging()
    run(args.files)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
