"""
Collection of loader diagnostics.

Every diagnostic is both recorded (so callers and tests can inspect it) and
written to the package logger, which is the side channel the command-line
runner shows on stderr.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .data_classes import Diagnostic, DiagnosticKind

logger = logging.getLogger(__name__)


class DiagnosticLog:
    """Accumulates diagnostics for one load call."""

    def __init__(self, source: Optional[str] = None):
        self.source = source
        self.records: List[Diagnostic] = []

    def warn(self, kind: DiagnosticKind, message: str, triangle_index: Optional[int] = None) -> Diagnostic:
        record = Diagnostic(kind=kind, message=message, source=self.source, triangle_index=triangle_index)
        self.records.append(record)
        logger.warning("%s", record)
        return record

    def __len__(self) -> int:
        return len(self.records)
