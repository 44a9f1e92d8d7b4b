from __future__ import annotations

from .model import Diagnostic, DiagnosticKind, PageSet


def validate_page(page: str, page_set: PageSet) -> list[Diagnostic]:
    relpath = page[1:]
    record = page_set[page]
    diagnostics: list[Diagnostic] = []
    for target, fragment in record.links:
        target_record = page_set.get(target)
        if target_record is None:
            diagnostics.append(
                Diagnostic(
                    page=page,
                    kind=DiagnosticKind.BROKEN_LINK,
                    message=f"Broken internal link from {relpath} -> {target}",
                    target=target,
                    fragment=fragment,
                )
            )
        elif fragment is not None and fragment not in target_record.fragments:
            diagnostics.append(
                Diagnostic(
                    page=page,
                    kind=DiagnosticKind.BROKEN_FRAGMENT,
                    message=f"Broken fragment link from {relpath} -> {target}#{fragment}",
                    target=target,
                    fragment=fragment,
                )
            )
    for error in record.errors:
        diagnostics.append(Diagnostic(page=page, kind=DiagnosticKind.MARKDOWN_LINK, message=error))
    return diagnostics


def validate_site(page_set: PageSet) -> dict[str, list[Diagnostic]]:
    """Validate every page against the frozen page set, keyed by page path."""
    return {page: validate_page(page, page_set) for page in sorted(page_set)}
