"""
Constants
Centralised storage for severities, report ranges and ordering strategy names.
"""
ARROW = "\u2192"

SEVERITIES = ("critical", "warning", "info")
SEVERITY_LABELS = {
    "critical": "CRITICAL",
    "warning": "WARNING",
    "info": "INFO",
}
FILTER_ALL = "all"

# Report ranges (inclusive)
SCORE_MIN, SCORE_MAX = 35, 96
NODE_COUNT_MIN, NODE_COUNT_MAX = 80, 479
SCAN_DURATION_MIN, SCAN_DURATION_MAX = 0.4, 3.2
PAGE_COUNT_MIN, PAGE_COUNT_MAX = 1, 8
LINE_JITTER = 20

# Score bands
SCORE_BAND_GOOD = 80
SCORE_BAND_FAIR = 60

ORDERING_KEYED = "keyed"
ORDERING_COMPARISON = "comparison"
ORDERING_STRATEGIES = (ORDERING_KEYED, ORDERING_COMPARISON)
