#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path

from doclinks.cli import main

if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:], default_site_root=Path(__file__).resolve().parent.parent, prog="validate_links.py"))
