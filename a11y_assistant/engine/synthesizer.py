"""
Report Synthesizer
==================
Builds a ScanReport from an input string and an issue catalog.

STRICT DRAW ORDER (never reorder — every report depends on it):
    1. score            pick(62) + 35
    2. issue count      tiered by score: >= 85 → pick(2)+1,
                        >= 65 → pick(3)+2, else pick(4)+3
    3. catalog order    configured ordering strategy
    4. selection        first min(count, len(catalog)) templates
    5. per issue        variant = pick(len(variants)),
                        line offset = pick(40) - 20
    6. node count       pick(400) + 80
    7. scan duration    round(random() * 2.8 + 0.4, 1)
    8. page count       pick(8) + 1

No I/O, no shared state: each report gets its own SeededRandom.
"""
import logging
from typing import Iterable

from a11y_assistant.catalog.loader import validate_catalog
from a11y_assistant.core.constants import LINE_JITTER, ORDERING_KEYED
from a11y_assistant.engine.ordering import get_ordering
from a11y_assistant.engine.seeded_random import SeededRandom
from a11y_assistant.models.issue_template import IssueTemplate
from a11y_assistant.models.scan_report import GeneratedIssue, ScanReport

logger = logging.getLogger(__name__)


def _issue_count(score: int, rng: SeededRandom) -> int:
    if score >= 85:
        return rng.pick(2) + 1
    if score >= 65:
        return rng.pick(3) + 2
    return rng.pick(4) + 3


class ReportSynthesizer:
    """
    Binds a validated catalog and an ordering strategy, then produces one
    report per input string.

    The catalog is validated here, so a bad catalog fails when the
    synthesizer is built rather than on the first scan.
    """

    def __init__(self, catalog: Iterable[IssueTemplate], strategy: str = ORDERING_KEYED):
        self.catalog = validate_catalog(catalog)
        self.strategy = strategy
        self._order = get_ordering(strategy)

    def synthesize(self, text: str) -> ScanReport:
        rng = SeededRandom(text)

        score = rng.pick(62) + 35
        count = _issue_count(score, rng)

        ordered = self._order(self.catalog, rng)
        selected = ordered[:min(count, len(ordered))]

        issues = []
        for sequence_id, template in enumerate(selected, start=1):
            variant = template.variants[rng.pick(len(template.variants))]
            line_offset = rng.pick(2 * LINE_JITTER) - LINE_JITTER
            issues.append(GeneratedIssue(
                sequence_id=sequence_id,
                severity=template.severity,
                rule=template.rule,
                standard_reference=template.standard_reference,
                description=template.description,
                element=variant.element,
                fix=variant.fix,
                file_path=variant.file_path,
                line=max(1, variant.line + line_offset),
                note=variant.note,
            ))

        node_count = rng.pick(400) + 80
        scan_duration = round(rng.random() * 2.8 + 0.4, 1)
        page_count = rng.pick(8) + 1

        logger.debug(
            f"Synthesized report for {text!r}: score={score} issues={len(issues)} "
            f"strategy={self.strategy} draws={rng.draws}"
        )
        return ScanReport(
            score=score,
            issues=tuple(issues),
            node_count=node_count,
            scan_duration_seconds=scan_duration,
            page_count=page_count,
        )


def synthesize_report(
    text: str,
    catalog: Iterable[IssueTemplate],
    strategy: str = ORDERING_KEYED,
) -> ScanReport:
    """Build the report for `text` from `catalog` in one call."""
    return ReportSynthesizer(catalog, strategy).synthesize(text)
