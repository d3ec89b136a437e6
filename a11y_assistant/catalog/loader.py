"""
Catalog Loader
==============
Validates issue catalogs and loads custom ones from YAML.

YAML layout:
    templates:
      - id: img-alt
        severity: critical
        rule: img-alt
        standard_reference: "WCAG 2.1 – 1.1.1 Non-text Content (Level A)"
        description: "..."
        variants:
          - element: '<img src="/hero.jpg">'
            fix: '<img src="/hero.jpg" alt="...">'
            file_path: components/Hero.jsx
            line: 42
            note: optional

Validation happens once, at load time. A catalog that passes is a tuple of
frozen IssueTemplate records and is never modified afterwards.
"""
import logging
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from a11y_assistant.catalog.default_catalog import DEFAULT_CATALOG
from a11y_assistant.core.config import ISSUE_CATALOG_PATH
from a11y_assistant.models.issue_template import IssueTemplate

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when an issue catalog is empty or malformed."""


def validate_catalog(entries: Iterable[IssueTemplate]) -> tuple[IssueTemplate, ...]:
    """
    Check a catalog before it is used for synthesis.

    Parameters
    ----------
    entries : Iterable[IssueTemplate]
        Catalog entries in their significant order.

    Returns
    -------
    tuple[IssueTemplate, ...]
        The same entries as an immutable tuple.

    Raises
    ------
    CatalogError
        If the catalog is empty, holds something other than IssueTemplate,
        or repeats a template id.
    """
    catalog = tuple(entries)
    if not catalog:
        raise CatalogError("Issue catalog is empty; at least one template is required")

    seen: set[str] = set()
    for idx, template in enumerate(catalog):
        if not isinstance(template, IssueTemplate):
            raise CatalogError(
                f"Catalog entry {idx} is {type(template).__name__}, expected IssueTemplate"
            )
        if not template.variants:
            raise CatalogError(f"Template '{template.id}' has no variants")
        if template.id in seen:
            raise CatalogError(f"Duplicate template id '{template.id}'")
        seen.add(template.id)

    return catalog


def load_catalog(path: str | Path) -> tuple[IssueTemplate, ...]:
    """Load and validate a YAML issue catalog."""
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogError(f"Cannot read issue catalog {path}: {e}") from e
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in issue catalog {path}: {e}") from e

    if not isinstance(raw, dict) or not isinstance(raw.get("templates"), list):
        raise CatalogError(f"Issue catalog {path} must contain a 'templates' list")

    templates = []
    for idx, entry in enumerate(raw["templates"]):
        try:
            templates.append(IssueTemplate.model_validate(entry))
        except ValidationError as e:
            raise CatalogError(f"Invalid template #{idx} in {path}: {e}") from e

    catalog = validate_catalog(templates)
    logger.info(f"Loaded {len(catalog)} issue templates from {path}")
    return catalog


def get_catalog(path: Optional[str] = ISSUE_CATALOG_PATH) -> tuple[IssueTemplate, ...]:
    """Return the configured catalog: the YAML file if one is set, else the built-in one."""
    if path:
        return load_catalog(path)
    return DEFAULT_CATALOG
