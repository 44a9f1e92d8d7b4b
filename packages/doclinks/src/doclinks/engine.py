from __future__ import annotations

import asyncio

from .context import RunContext
from .logging import log_event
from .model import Diagnostic, PageSet, ValidationResult
from .pages import build_page_set
from .validate import validate_site


def check_page_set(ctx: RunContext, page_set: PageSet) -> ValidationResult:
    reported: list[Diagnostic] = []
    suppressed = 0
    for page, diagnostics in validate_site(page_set).items():
        if ctx.in_scope(page):
            reported.extend(diagnostics)
        else:
            suppressed += len(diagnostics)
    return ValidationResult(
        diagnostics=tuple(reported),
        page_count=len(page_set),
        link_count=sum(len(record.links) for record in page_set.values()),
        suppressed_count=suppressed,
    )


async def run_async(ctx: RunContext) -> ValidationResult:
    page_set = await build_page_set(ctx)
    log_event(ctx, "info", "discovery", "pages_loaded", root=str(ctx.docs_root), pages=len(page_set))
    result = check_page_set(ctx, page_set)
    log_event(
        ctx,
        "info" if result.passed else "error",
        "validate",
        "finished",
        links=result.link_count,
        diagnostics=len(result.diagnostics),
        suppressed=result.suppressed_count,
        only_docs=ctx.only_docs,
        **result.counts,
    )
    return result


def run(ctx: RunContext) -> ValidationResult:
    """Build the page set, validate it, and return the scoped result.

    I/O failures propagate; content defects are returned as diagnostics.
    """
    return asyncio.run(run_async(ctx))
