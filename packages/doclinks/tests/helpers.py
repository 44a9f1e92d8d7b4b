from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[3]
SRC = ROOT / "packages/doclinks/src"


def write_pages(site_root: Path, pages: dict[str, str]) -> None:
    for page_path, body in pages.items():
        target = site_root / page_path.lstrip("/")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(body, encoding="utf-8")


def run_doclinks(*args: str, site_root: Path, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    full_env = os.environ.copy()
    full_env["PYTHONPATH"] = str(SRC)
    full_env["DOCLINKS_SITE_ROOT"] = str(site_root)
    full_env.setdefault("RUN_ID", "pytest-run")
    full_env.update(env or {})
    return subprocess.run(
        [sys.executable, "-m", "doclinks", *args],
        cwd=site_root,
        env=full_env,
        text=True,
        capture_output=True,
        check=False,
    )
