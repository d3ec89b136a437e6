"""
Scan Report Model
=================
Pydantic models for the synthesizer's output.

GeneratedIssue copies its descriptive fields from the source template and
its snippet fields from the selected variant. Only `line` differs from the
variant: it carries a small signed jitter and is clamped to >= 1.

ScanReport is immutable and has no identity beyond its value; two reports
built from the same input, catalog and ordering strategy compare equal.
"""
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from a11y_assistant.core.constants import (
    NODE_COUNT_MAX,
    NODE_COUNT_MIN,
    PAGE_COUNT_MAX,
    PAGE_COUNT_MIN,
    SCAN_DURATION_MAX,
    SCAN_DURATION_MIN,
    SCORE_MAX,
    SCORE_MIN,
)
from .issue_template import Severity


class GeneratedIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    sequence_id: int = Field(ge=1)
    severity: Severity
    rule: str
    standard_reference: str
    description: str
    element: str
    fix: str
    file_path: str
    line: int = Field(ge=1)
    note: Optional[str] = None


class ScanReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=SCORE_MIN, le=SCORE_MAX)
    issues: Tuple[GeneratedIssue, ...]
    node_count: int = Field(ge=NODE_COUNT_MIN, le=NODE_COUNT_MAX)
    scan_duration_seconds: float = Field(ge=SCAN_DURATION_MIN, le=SCAN_DURATION_MAX)
    page_count: int = Field(ge=PAGE_COUNT_MIN, le=PAGE_COUNT_MAX)
