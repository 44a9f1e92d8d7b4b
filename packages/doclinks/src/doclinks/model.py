from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple


class Link(NamedTuple):
    target: str
    fragment: str | None = None


@dataclass(frozen=True)
class PageRecord:
    links: tuple[Link, ...] = ()
    fragments: frozenset[str] = frozenset()
    errors: tuple[str, ...] = ()


PageSet = dict[str, PageRecord]


class DiagnosticKind(str, Enum):
    BROKEN_LINK = "broken_link"
    BROKEN_FRAGMENT = "broken_fragment"
    MARKDOWN_LINK = "markdown_link"


@dataclass(frozen=True)
class Diagnostic:
    page: str
    kind: DiagnosticKind
    message: str
    target: str = ""
    fragment: str | None = None

    @property
    def relpath(self) -> str:
        return self.page[1:] if self.page.startswith("/") else self.page


@dataclass(frozen=True)
class ValidationResult:
    diagnostics: tuple[Diagnostic, ...] = ()
    page_count: int = 0
    link_count: int = 0
    suppressed_count: int = 0
    counts: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.counts:
            counts = {kind.value: 0 for kind in DiagnosticKind}
            for diag in self.diagnostics:
                counts[diag.kind.value] += 1
            object.__setattr__(self, "counts", counts)

    @property
    def passed(self) -> bool:
        return not self.diagnostics


__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "Link",
    "PageRecord",
    "PageSet",
    "ValidationResult",
]
