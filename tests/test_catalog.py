"""
Unit Tests — Issue Catalog
==========================
Built-in catalog shape, template validation and YAML loading.
"""
import pytest
from pydantic import ValidationError

from a11y_assistant.catalog.default_catalog import DEFAULT_CATALOG
from a11y_assistant.catalog.loader import (
    CatalogError,
    get_catalog,
    load_catalog,
    validate_catalog,
)
from a11y_assistant.models.issue_template import IssueTemplate, Variant

VALID_YAML = """
templates:
  - id: img-alt
    severity: critical
    rule: img-alt
    standard_reference: "WCAG 2.1 – 1.1.1 Non-text Content (Level A)"
    description: Image is missing an alt attribute.
    variants:
      - element: '<img src="/hero.jpg">'
        fix: '<img src="/hero.jpg" alt="Hero">'
        file_path: components/Hero.jsx
        line: 42
      - element: '<img src="/logo.png">'
        fix: '<img src="/logo.png" alt="Logo">'
        file_path: components/Header.jsx
        line: 18
        note: decorative logos still need alt=""
  - id: html-lang
    severity: info
    rule: html-has-lang
    standard_reference: "WCAG 2.1 – 3.1.1 Language of Page (Level A)"
    description: Missing lang attribute.
    variants:
      - element: <html>
        fix: <html lang="en">
        file_path: index.html
        line: 1
"""


# ---------------------------------------------------------------------------
# 1. Built-in catalog
# ---------------------------------------------------------------------------
class TestDefaultCatalog:

    def test_template_order(self):
        assert [t.id for t in DEFAULT_CATALOG] == [
            "img-alt", "button-name", "color-contrast", "label", "heading-order",
            "focus-visible", "aria-required-parent", "link-name", "html-lang",
            "tabindex", "select-name",
        ]

    def test_variant_counts(self):
        assert [len(t.variants) for t in DEFAULT_CATALOG] == [3, 3, 3, 3, 3, 3, 1, 2, 1, 1, 1]

    def test_severity_mix(self):
        severities = [t.severity for t in DEFAULT_CATALOG]
        assert severities.count("critical") == 5
        assert severities.count("warning") == 4
        assert severities.count("info") == 2

    def test_passes_validation(self):
        assert validate_catalog(DEFAULT_CATALOG) == DEFAULT_CATALOG

    def test_notes_only_where_expected(self):
        noted = {t.id for t in DEFAULT_CATALOG if any(v.note for v in t.variants)}
        assert noted == {"color-contrast", "heading-order"}

    def test_multiline_fixes_preserved(self):
        label = DEFAULT_CATALOG[3]
        assert label.variants[0].fix == (
            '<label for="email">Email address</label>\n'
            '<input id="email" type="email" placeholder="Enter your email">'
        )


# ---------------------------------------------------------------------------
# 2. Template model validation
# ---------------------------------------------------------------------------
class TestTemplateModel:

    def test_template_without_variants_rejected(self):
        with pytest.raises(ValidationError, match="at least one variant"):
            IssueTemplate(
                id="x", severity="info", rule="x", standard_reference="",
                description="", variants=(),
            )

    def test_unknown_severity_rejected(self):
        with pytest.raises(ValidationError):
            IssueTemplate(
                id="x", severity="blocker", rule="x", standard_reference="",
                description="", variants=(Variant(element="a", fix="b", file_path="c", line=1),),
            )

    def test_variant_line_must_be_positive(self):
        with pytest.raises(ValidationError):
            Variant(element="a", fix="b", file_path="c", line=0)

    def test_template_is_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_CATALOG[0].severity = "info"


# ---------------------------------------------------------------------------
# 3. validate_catalog
# ---------------------------------------------------------------------------
class TestValidateCatalog:

    def test_empty(self):
        with pytest.raises(CatalogError, match="empty"):
            validate_catalog([])

    def test_duplicate_ids(self):
        with pytest.raises(CatalogError, match="Duplicate template id 'img-alt'"):
            validate_catalog([DEFAULT_CATALOG[0], DEFAULT_CATALOG[0]])

    def test_wrong_entry_type(self):
        with pytest.raises(CatalogError, match="entry 1 is dict"):
            validate_catalog([DEFAULT_CATALOG[0], {"id": "oops"}])

    def test_returns_tuple(self):
        assert isinstance(validate_catalog(list(DEFAULT_CATALOG)), tuple)

    def test_catalog_error_is_value_error(self):
        assert issubclass(CatalogError, ValueError)


# ---------------------------------------------------------------------------
# 4. YAML loading
# ---------------------------------------------------------------------------
class TestLoadCatalog:

    def test_load_valid_file(self, tmp_path):
        path = tmp_path / "catalog.yml"
        path.write_text(VALID_YAML, encoding="utf-8")
        catalog = load_catalog(path)
        assert [t.id for t in catalog] == ["img-alt", "html-lang"]
        assert catalog[0].variants[1].note == 'decorative logos still need alt=""'
        assert catalog[1].variants[0].line == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError, match="Cannot read"):
            load_catalog(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("templates: [unclosed", encoding="utf-8")
        with pytest.raises(CatalogError, match="Invalid YAML"):
            load_catalog(path)

    def test_missing_templates_key(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("rules: []\n", encoding="utf-8")
        with pytest.raises(CatalogError, match="'templates' list"):
            load_catalog(path)

    def test_empty_templates_list(self, tmp_path):
        path = tmp_path / "none.yml"
        path.write_text("templates: []\n", encoding="utf-8")
        with pytest.raises(CatalogError, match="empty"):
            load_catalog(path)

    def test_template_without_variants(self, tmp_path):
        path = tmp_path / "novariants.yml"
        path.write_text(
            "templates:\n"
            "  - id: x\n    severity: info\n    rule: x\n"
            "    standard_reference: r\n    description: d\n    variants: []\n",
            encoding="utf-8",
        )
        with pytest.raises(CatalogError, match="Invalid template #0"):
            load_catalog(path)

    def test_get_catalog_defaults_to_builtin(self):
        assert get_catalog(None) is DEFAULT_CATALOG

    def test_get_catalog_uses_path(self, tmp_path):
        path = tmp_path / "catalog.yml"
        path.write_text(VALID_YAML, encoding="utf-8")
        assert len(get_catalog(str(path))) == 2
