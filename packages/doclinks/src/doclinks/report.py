from __future__ import annotations

import sys
from typing import Iterable, TextIO

from .model import Diagnostic


def format_annotation(diag: Diagnostic) -> str:
    return f"::error file={diag.relpath}::{diag.message}"


def emit(diagnostics: Iterable[Diagnostic], stream: TextIO | None = None) -> bool:
    """Print one annotation per diagnostic; true when anything was printed."""
    out = stream if stream is not None else sys.stdout
    failed = False
    for diag in diagnostics:
        out.write(format_annotation(diag) + "\n")
        failed = True
    return failed
