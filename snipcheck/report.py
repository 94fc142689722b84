# snipcheck/report.py
from typing import Iterable, List, Optional, Sequence

from .models import Report, Status, ValidationResult

_INDENT = "        "


def build_report(
    path: str,
    language: Optional[str],
    results: Iterable[ValidationResult],
    ignored: int = 0,
) -> Report:
    """Collect results for one document, ordered by their position in it."""
    ordered = sorted(results, key=lambda r: (r.block.start_line, r.block.end_line))
    return Report(path=path, language=language, results=ordered, ignored=ignored)


def _result_line(result: ValidationResult) -> str:
    parts = [f"  {result.status.value}  lines {result.block.line_range}"]
    if result.is_preamble:
        parts.append("[preamble]")
    if result.status is Status.SKIPPED and result.diagnostic:
        parts.append(result.diagnostic)
    return " ".join(parts)


def _indented(text: str) -> List[str]:
    return [f"{_INDENT}{line}".rstrip() for line in text.rstrip("\n").splitlines()]


def summary_line(passed: int, failed: int, skipped: int) -> str:
    return f"PASS={passed} FAIL={failed} SKIP={skipped}"


def render_report(report: Report, verbose: bool = False, summary: bool = True) -> str:
    """
    Deterministic text for one report. Failure diagnostics are always shown;
    passing snippets' output only when `verbose`. The summary line comes last.
    """
    header = f"{report.path}: "
    if report.language:
        header += f"{report.total} {report.language} snippet(s)"
    else:
        header += "no tagged code blocks"
    if report.ignored:
        header += f", {report.ignored} other block(s) ignored"
    lines = [header]
    for result in report.results:
        lines.append(_result_line(result))
        if result.status is Status.FAILED and result.diagnostic:
            lines.extend(_indented(result.diagnostic))
        elif verbose and result.status is Status.PASSED and result.diagnostic:
            lines.extend(_indented(result.diagnostic))
    if summary:
        lines.append(summary_line(report.passed, report.failed, report.skipped))
    return "\n".join(lines) + "\n"


def render_summary(reports: Sequence[Report]) -> str:
    """One summary line covering several documents."""
    return summary_line(
        sum(r.passed for r in reports),
        sum(r.failed for r in reports),
        sum(r.skipped for r in reports),
    )


def exit_code(reports: Sequence[Report]) -> int:
    """0 when no snippet failed, 1 otherwise."""
    return 0 if all(r.ok for r in reports) else 1
