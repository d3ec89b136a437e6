"""
Issue Template Model
====================
Pydantic models for the static issue catalog.

A template describes one class of accessibility defect. Its variants are
concrete before/after examples; they are selected by index, so their order
is part of the catalog's identity and must never be re-sorted.

Fields (IssueTemplate):
    id                  — stable short identifier (e.g. "img-alt")
    severity            — critical / warning / info
    rule                — machine rule name (axe-style)
    standard_reference  — human-readable WCAG citation
    description         — explanation shown to the user
    variants            — non-empty tuple of Variant

Fields (Variant):
    element    — offending snippet
    fix        — corrected snippet
    file_path  — source file the snippet is attributed to
    line       — integer >= 1
    note       — optional extra detail (contrast ratios, heading jumps)
"""
from typing import Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator


Severity = Literal["critical", "warning", "info"]


class Variant(BaseModel):
    model_config = ConfigDict(frozen=True)

    element: str
    fix: str
    file_path: str
    line: int = Field(ge=1)
    note: Optional[str] = None


class IssueTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    severity: Severity
    rule: str = Field(min_length=1)
    standard_reference: str
    description: str
    variants: Tuple[Variant, ...]

    @field_validator("variants")
    @classmethod
    def require_variants(cls, v: Tuple[Variant, ...]) -> Tuple[Variant, ...]:
        if not v:
            raise ValueError("an issue template needs at least one variant")
        return v
