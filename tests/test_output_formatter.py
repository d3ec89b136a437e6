"""
Unit Tests — Output Formatter
==============================
Validates byte-perfect text rendering of issues and reports.
Every assertion uses exact string equality.
"""
import pytest

from a11y_assistant.catalog.default_catalog import DEFAULT_CATALOG
from a11y_assistant.core.constants import ARROW
from a11y_assistant.core.output_formatter import (
    fix_summary,
    format_header,
    format_issue,
    format_report,
    severity_label,
    validate_severity,
)
from a11y_assistant.engine.synthesizer import synthesize_report

EXAMPLE_URL = "https://example.com"


@pytest.fixture
def example_report():
    return synthesize_report(EXAMPLE_URL, DEFAULT_CATALOG)


# ---------------------------------------------------------------------------
# 1. Arrow constant
# ---------------------------------------------------------------------------
class TestArrowConstant:

    def test_arrow_is_unicode_2192(self):
        assert ord(ARROW) == 0x2192

    def test_arrow_is_not_ascii(self):
        assert ARROW != "->"


# ---------------------------------------------------------------------------
# 2. Helpers
# ---------------------------------------------------------------------------
class TestHelpers:

    def test_severity_labels(self):
        assert severity_label("critical") == "CRITICAL"
        assert severity_label("warning") == "WARNING"
        assert severity_label("info") == "INFO"

    def test_unknown_severity(self):
        with pytest.raises(ValueError, match="Unknown severity"):
            validate_severity("fatal")

    def test_non_string_severity(self):
        with pytest.raises(TypeError):
            validate_severity(3)

    def test_fix_summary_first_line(self):
        assert fix_summary("a {\n  outline: 2px;\n}") == "a {"

    def test_fix_summary_skips_blank_lines(self):
        assert fix_summary("\n\n  <h2>FAQ</h2>\n") == "<h2>FAQ</h2>"

    def test_fix_summary_empty(self):
        assert fix_summary("") == ""


# ---------------------------------------------------------------------------
# 3. Issue lines
# ---------------------------------------------------------------------------
class TestFormatIssue:

    def test_exact_issue_line(self, example_report):
        assert format_issue(example_report.issues[0]) == (
            f"[CRITICAL] aria-required-parent in components/Dropdown.jsx line 59 "
            f"{ARROW} Fix: <div role=\"listbox\" aria-label=\"Options\">"
        )

    def test_multiline_fix_is_cut(self, example_report):
        assert format_issue(example_report.issues[1]) == (
            f"[WARNING] focus-visible in styles/global.css line 49 {ARROW} Fix: button:focus-visible {{"
        )

    def test_no_trailing_whitespace_or_newline(self, example_report):
        for issue in example_report.issues:
            line = format_issue(issue)
            assert line == line.rstrip()
            assert "\n" not in line


# ---------------------------------------------------------------------------
# 4. Reports
# ---------------------------------------------------------------------------
class TestFormatReport:

    def test_exact_header(self, example_report):
        assert format_header(EXAMPLE_URL, example_report) == (
            "https://example.com: score 70/100 (fair), 4 issues "
            "(2 critical, 2 warning, 0 info), 426 nodes, 6 pages, 2.2s"
        )

    def test_exact_report(self, example_report):
        assert format_report(EXAMPLE_URL, example_report).split("\n") == [
            "https://example.com: score 70/100 (fair), 4 issues "
            "(2 critical, 2 warning, 0 info), 426 nodes, 6 pages, 2.2s",
            f"[CRITICAL] aria-required-parent in components/Dropdown.jsx line 59 "
            f"{ARROW} Fix: <div role=\"listbox\" aria-label=\"Options\">",
            f"[WARNING] focus-visible in styles/global.css line 49 {ARROW} Fix: button:focus-visible {{",
            f"[CRITICAL] link-name in components/Card.jsx line 75 {ARROW} Fix: "
            f"<a href=\"/more\" aria-label=\"Read more about our services\"><svg aria-hidden=\"true\">...</svg></a>",
            f"[WARNING] heading-order in components/Sidebar.jsx line 42 {ARROW} Fix: <h3>Related Articles</h3>",
        ]

    def test_deterministic(self, example_report):
        again = synthesize_report(EXAMPLE_URL, DEFAULT_CATALOG)
        assert format_report(EXAMPLE_URL, example_report) == format_report(EXAMPLE_URL, again)

    def test_one_line_per_issue(self):
        report = synthesize_report("https://a11y.dev", DEFAULT_CATALOG)
        assert len(format_report("https://a11y.dev", report).split("\n")) == len(report.issues) + 1
