from __future__ import annotations

import asyncio
from pathlib import Path

from .config import LinkRules
from .context import RunContext
from .discovery import discover_pages
from .extract import extract_fragments, extract_links
from .model import PageRecord, PageSet


def build_record(text: str, page_path: str, rules: LinkRules) -> PageRecord:
    links, errors = extract_links(text, page_path, rules)
    return PageRecord(links=tuple(links), fragments=extract_fragments(text), errors=tuple(errors))


async def load_page_record(path: Path, page_path: str, rules: LinkRules) -> PageRecord:
    text = await asyncio.to_thread(path.read_text, encoding="utf-8", errors="replace")
    return build_record(text, page_path, rules)


async def build_page_set(ctx: RunContext) -> PageSet:
    """Discover and scan every page; returns only once all records exist."""
    files = await discover_pages(ctx.docs_root, ctx.rules.page_extension)
    keys = [ctx.page_path(path) for path in files]
    records = await asyncio.gather(*(load_page_record(path, key, ctx.rules) for path, key in zip(files, keys)))
    return dict(zip(keys, records))
