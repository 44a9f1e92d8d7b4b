from __future__ import annotations

import io

from doclinks.model import Diagnostic, DiagnosticKind, ValidationResult
from doclinks.report import emit, format_annotation


def test_annotation_strips_leading_separator() -> None:
    diag = Diagnostic(page="/en/docs/a.html", kind=DiagnosticKind.MARKDOWN_LINK, message="Incorrect markdown link: [a][b]")
    assert format_annotation(diag) == "::error file=en/docs/a.html::Incorrect markdown link: [a][b]"


def test_emit_reports_failure_only_when_something_printed() -> None:
    out = io.StringIO()
    assert emit([], out) is False
    assert out.getvalue() == ""
    diag = Diagnostic(page="/a.html", kind=DiagnosticKind.BROKEN_LINK, message="Broken internal link from a.html -> /b.html")
    assert emit([diag, diag], out) is True
    assert len(out.getvalue().splitlines()) == 2


def test_result_counts_by_kind() -> None:
    diags = (
        Diagnostic(page="/a.html", kind=DiagnosticKind.BROKEN_LINK, message="x"),
        Diagnostic(page="/a.html", kind=DiagnosticKind.BROKEN_LINK, message="y"),
        Diagnostic(page="/b.html", kind=DiagnosticKind.BROKEN_FRAGMENT, message="z"),
    )
    result = ValidationResult(diagnostics=diags)
    assert not result.passed
    assert result.counts == {"broken_link": 2, "broken_fragment": 1, "markdown_link": 0}
    assert ValidationResult().passed
