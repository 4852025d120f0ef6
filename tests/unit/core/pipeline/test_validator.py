from __future__ import annotations

"""
Unit tests for the Configuration Document Validation Service.

Verifies:
1. Structural errors are always fatal.
2. Item-level problems are discarded with a warning (or raise in strict mode).
3. Palette and settings checks.
"""

import pytest

from glyphls.core.pipeline.validator import validate_document
from glyphls.domain.errors import ConfigurationError


def test_valid_document_passes_untouched(default_doc):
    clean, warnings = validate_document(default_doc, strict=True)
    assert clean == default_doc
    assert warnings == []


def test_top_level_must_be_a_table():
    with pytest.raises(ConfigurationError, match="top level"):
        validate_document(["files"])


def test_table_must_be_a_mapping():
    with pytest.raises(ConfigurationError, match=r"\[files\] must be a table"):
        validate_document({"files": "nope"})


def test_ignore_category_must_be_a_list():
    with pytest.raises(ConfigurationError, match="ignore.files must be a list"):
        validate_document({"ignore": {"files": ".pyc"}})


def test_unknown_table_is_dropped_with_warning():
    clean, warnings = validate_document({"icons": {"a": "b"}, "files": {"x": "y"}})
    assert "icons" not in clean
    assert clean["files"] == {"x": "y"}
    assert len(warnings) == 1
    assert "unknown table [icons]" in warnings[0]


def test_non_string_values_are_discarded():
    clean, warnings = validate_document({"folders": {"src": "S", "bin": 1}})
    assert clean["folders"] == {"src": "S"}
    assert "'bin' must be a string" in warnings[0]


def test_ignore_items_are_cleaned():
    doc = {"ignore": {"files": ["  .log ", "", 5], "folders": ["dist"], "links": ["x"]}}
    clean, warnings = validate_document(doc)

    assert clean["ignore"] == {"files": [".log"], "folders": ["dist"]}
    assert len(warnings) == 3


def test_unknown_color_is_kept_but_reported():
    clean, warnings = validate_document({"colors": {"dir": "Teal", "file": "GREY"}})
    assert clean["colors"] == {"dir": "Teal", "file": "GREY"}
    assert len(warnings) == 1
    assert "'Teal'" in warnings[0]


def test_invalid_size_units_are_removed():
    clean, warnings = validate_document({"settings": {"size_units": "decimal"}})
    assert clean["settings"] == {}
    assert "size_units" in warnings[0]


def test_strict_mode_raises_on_item_problems():
    with pytest.raises(ConfigurationError, match="not in the palette"):
        validate_document({"colors": {"dir": "teal"}}, strict=True)


def test_warnings_are_logged(caplog):
    with caplog.at_level("WARNING"):
        validate_document({"bogus": {}}, source="user.toml")
    assert "user.toml: unknown table [bogus] ignored." in caplog.text


def test_input_document_is_not_mutated():
    doc = {"settings": {"size_units": "decimal"}}
    validate_document(doc)
    assert doc == {"settings": {"size_units": "decimal"}}
