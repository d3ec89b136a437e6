"""
Output Formatter
================
Plain-text rendering of scan reports for logs, terminals and CI annotations.

STRICT DETERMINISM CONTRACT:
  - This module NEVER reads environment variables.
  - This module NEVER reorders issues; report order is selection order.
  - Given the same report, it ALWAYS returns the exact same string.

Issue line format (byte-perfect):
    [{LABEL}] {rule} in {file_path} line {line} → Fix: {first line of fix}

Report format:
    one header line, then one issue line per issue, joined with "\n".
"""
from a11y_assistant.core.constants import ARROW, SEVERITY_LABELS
from a11y_assistant.models.scan_report import GeneratedIssue, ScanReport
from a11y_assistant.utils.report_summary import count_by_severity, score_band


# ---------------------------------------------------------------------------
# Validation Helpers
# ---------------------------------------------------------------------------
def validate_severity(severity: str) -> None:
    """
    Raises ValueError if severity has no display label.
    """
    if not isinstance(severity, str):
        raise TypeError(f"severity must be str, got {type(severity).__name__}")
    if severity not in SEVERITY_LABELS:
        raise ValueError(
            f"Unknown severity '{severity}'. "
            f"Allowed values: {sorted(SEVERITY_LABELS)}"
        )


def severity_label(severity: str) -> str:
    validate_severity(severity)
    return SEVERITY_LABELS[severity]


def fix_summary(fix: str) -> str:
    """First non-blank line of a fix snippet, stripped."""
    for line in fix.splitlines():
        if line.strip():
            return line.strip()
    return ""


# ---------------------------------------------------------------------------
# Core Format Functions
# ---------------------------------------------------------------------------
def format_issue(issue: GeneratedIssue) -> str:
    """
    Render one generated issue as a single line.

    Rules enforced here:
      - Severity label is uppercase and bracketed.
      - "in" and "line" are lowercase.
      - ARROW constant (U+2192) is used, never "->".
      - Multi-line fixes are cut to their first non-blank line.
      - No trailing whitespace, no newline appended.
    """
    return (
        f"[{severity_label(issue.severity)}] {issue.rule} in {issue.file_path} "
        f"line {issue.line} {ARROW} Fix: {fix_summary(issue.fix)}"
    )


def format_header(url: str, report: ScanReport) -> str:
    counts = count_by_severity(report)
    breakdown = ", ".join(f"{n} {severity}" for severity, n in counts.items())
    return (
        f"{url}: score {report.score}/100 ({score_band(report.score)}), "
        f"{len(report.issues)} issues ({breakdown}), "
        f"{report.node_count} nodes, {report.page_count} pages, "
        f"{report.scan_duration_seconds:.1f}s"
    )


def format_report(url: str, report: ScanReport) -> str:
    """Header line followed by one line per issue, in report order."""
    lines = [format_header(url, report)]
    lines.extend(format_issue(issue) for issue in report.issues)
    return "\n".join(lines)
