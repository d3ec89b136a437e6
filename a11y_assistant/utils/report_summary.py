"""
Report Summary
==============
Small derived views over a ScanReport: severity counts, severity filtering
and the score band used to colour the score.
"""
from a11y_assistant.core.constants import (
    FILTER_ALL,
    SCORE_BAND_FAIR,
    SCORE_BAND_GOOD,
    SEVERITIES,
)
from a11y_assistant.models.scan_report import GeneratedIssue, ScanReport


def count_by_severity(report: ScanReport) -> dict[str, int]:
    """Issue counts for every severity, zero-filled, in severity order."""
    counts = {severity: 0 for severity in SEVERITIES}
    for issue in report.issues:
        counts[issue.severity] += 1
    return counts


def filter_issues(report: ScanReport, severity: str = FILTER_ALL) -> list[GeneratedIssue]:
    """
    Return the issues of one severity, keeping report order.

    Raises
    ------
    ValueError
        If `severity` is neither "all" nor a known severity.
    """
    if severity == FILTER_ALL:
        return list(report.issues)
    if severity not in SEVERITIES:
        raise ValueError(
            f"Unknown severity filter '{severity}'. "
            f"Allowed: {FILTER_ALL}, {', '.join(SEVERITIES)}"
        )
    return [issue for issue in report.issues if issue.severity == severity]


def score_band(score: int) -> str:
    if score >= SCORE_BAND_GOOD:
        return "good"
    if score >= SCORE_BAND_FAIR:
        return "fair"
    return "poor"
