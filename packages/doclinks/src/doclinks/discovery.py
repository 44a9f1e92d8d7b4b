from __future__ import annotations

import asyncio
import os
from pathlib import Path


def _list_dir(path: Path) -> tuple[list[Path], list[Path]]:
    dirs: list[Path] = []
    files: list[Path] = []
    with os.scandir(path) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                dirs.append(Path(entry.path))
            else:
                files.append(Path(entry.path))
    return dirs, files


async def discover_pages(root: Path, extension: str = ".html") -> list[Path]:
    """Collect every page file beneath ``root``.

    Subdirectories are scanned concurrently and all of them are awaited before
    this directory's result is returned. An ``OSError`` from any listing
    propagates to the caller.
    """
    dirs, files = await asyncio.to_thread(_list_dir, root)
    pages = [path for path in files if path.name.endswith(extension)]
    nested = await asyncio.gather(*(discover_pages(sub, extension) for sub in dirs))
    for chunk in nested:
        pages.extend(chunk)
    return pages
