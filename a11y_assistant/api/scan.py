"""
POST /api/scan, GET /api/catalog
================================
Bridge endpoints between the frontend and the report synthesizer.

POST /api/scan accepts a URL (blank falls back to DEFAULT_SCAN_TARGET) and
an optional severity filter, and returns the synthesized report together
with the derived views the dashboard renders: severity counts, score band,
the filtered issue list and a plain-text summary.

The synthesizer is built once per process from the configured catalog and
ordering strategy; a broken catalog surfaces as HTTP 500 on first use.
"""
import logging
from functools import lru_cache
from typing import List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from a11y_assistant.catalog.loader import CatalogError, get_catalog
from a11y_assistant.core.config import DEFAULT_SCAN_TARGET, ORDERING_STRATEGY
from a11y_assistant.core.constants import FILTER_ALL
from a11y_assistant.core.output_formatter import format_report
from a11y_assistant.engine.ordering import OrderingError
from a11y_assistant.engine.synthesizer import ReportSynthesizer
from a11y_assistant.models.issue_template import IssueTemplate
from a11y_assistant.models.scan_report import GeneratedIssue, ScanReport
from a11y_assistant.utils.report_summary import count_by_severity, filter_issues, score_band

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Scanner"])


# ---------------------------------------------------------------------------
# Request / Response schemas
# ---------------------------------------------------------------------------
class ScanRequest(BaseModel):
    url: str = ""
    severity: str = FILTER_ALL


class ScanResponse(BaseModel):
    url: str
    report: ScanReport
    severity_counts: dict[str, int]
    score_band: str
    severity_filter: str
    issues: List[GeneratedIssue]
    summary_text: str


class CatalogResponse(BaseModel):
    ordering_strategy: str
    templates: List[IssueTemplate]


@lru_cache(maxsize=1)
def get_synthesizer() -> ReportSynthesizer:
    synthesizer = ReportSynthesizer(get_catalog(), ORDERING_STRATEGY)
    logger.info(
        f"Report synthesizer ready: {len(synthesizer.catalog)} templates, "
        f"strategy={synthesizer.strategy}"
    )
    return synthesizer


def _load_synthesizer() -> ReportSynthesizer:
    try:
        return get_synthesizer()
    except (CatalogError, OrderingError) as e:
        logger.error(f"Scanner misconfigured: {e}")
        raise HTTPException(status_code=500, detail=f"Scanner misconfigured: {e}")


@router.post("/scan", response_model=ScanResponse)
async def scan(request: ScanRequest):
    target = request.url.strip() or DEFAULT_SCAN_TARGET
    synthesizer = _load_synthesizer()

    report = synthesizer.synthesize(target)
    try:
        issues = filter_issues(report, request.severity)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        f"Scan {target}: score={report.score} issues={len(report.issues)} "
        f"filter={request.severity}"
    )
    return ScanResponse(
        url=target,
        report=report,
        severity_counts=count_by_severity(report),
        score_band=score_band(report.score),
        severity_filter=request.severity,
        issues=issues,
        summary_text=format_report(target, report),
    )


@router.get("/catalog", response_model=CatalogResponse)
async def catalog():
    synthesizer = _load_synthesizer()
    return CatalogResponse(
        ordering_strategy=synthesizer.strategy,
        templates=list(synthesizer.catalog),
    )
