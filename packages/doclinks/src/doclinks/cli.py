from __future__ import annotations

import sys
from pathlib import Path

from .context import RunContext
from .engine import run
from .errors import ScriptError
from .exit_codes import ERR_IO, ERR_USAGE, ERR_VALIDATION, OK
from .logging import log_event
from .report import emit


def main(argv: list[str] | None = None, default_site_root: Path | None = None, prog: str = "doclinks") -> int:
    args = sys.argv[1:] if argv is None else argv
    if args:
        print(f"usage: {prog}", file=sys.stderr)
        return ERR_USAGE
    try:
        ctx = RunContext.from_env(default_site_root)
    except ScriptError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return exc.code
    except OSError as exc:
        print(f"{prog}: {exc}", file=sys.stderr)
        return ERR_IO
    try:
        result = run(ctx)
    except OSError as exc:
        log_event(ctx, "error", "cli", "io_failure", error=str(exc))
        return ERR_IO
    return ERR_VALIDATION if emit(result.diagnostics) else OK
