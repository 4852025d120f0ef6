from __future__ import annotations

"""
Unit tests for the Configuration Loading Service.

Verifies:
1. The packaged default document parses and passes strict validation.
2. Discovery of the user document through XDG_CONFIG_HOME.
3. Merge semantics when a user document is present.
4. Fatal errors for malformed documents and explicit missing paths.
"""

from pathlib import Path

import pytest

from glyphls.core.services.config_loader import (
    load_configuration,
    load_default_document,
    parse_document,
    read_document,
)
from glyphls.domain.constants import FALLBACK_FILE_GLYPH, FALLBACK_FOLDER_GLYPH
from glyphls.domain.errors import ConfigurationError


@pytest.fixture
def xdg_home(tmp_path: Path, monkeypatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty temporary directory."""
    cfg = tmp_path / "xdg"
    cfg.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(cfg))
    return cfg


def test_packaged_defaults_are_valid():
    doc = load_default_document()

    assert doc["files"]["file"] == FALLBACK_FILE_GLYPH
    assert doc["folders"]["folder"] == FALLBACK_FOLDER_GLYPH
    assert set(doc["ignore"]) == {"files", "folders"}
    assert doc["colors"]["dir"] == "blue"


def test_defaults_only_when_no_user_file(xdg_home):
    config = load_configuration()

    assert config.files["file"] == FALLBACK_FILE_GLYPH
    assert ".git" in config.ignore_folders
    assert config.size_units == "binary"


def test_user_file_extends_and_replaces(xdg_home):
    (xdg_home / "ll.toml").write_text(
        '[files]\n'
        '".foo" = "X"\n'
        '[colors]\n'
        'dir = "magenta"\n'
        '[ignore]\n'
        'files = ["Secret.TXT"]\n'
        'folders = []\n',
        encoding="utf-8",
    )
    config = load_configuration()

    assert config.files[".foo"] == "X"
    assert config.files["file"] == FALLBACK_FILE_GLYPH
    assert config.colors["dir"] == "magenta"
    assert config.colors["file"] == "grey"
    assert config.ignore_files == frozenset({"secret.txt"})
    assert config.ignore_folders == frozenset()


def test_explicit_config_path(tmp_path, xdg_home):
    custom = tmp_path / "custom.toml"
    custom.write_text('[settings]\nsize_units = "si"\n', encoding="utf-8")

    config = load_configuration(str(custom))
    assert config.size_units == "si"


def test_explicit_missing_path_is_fatal(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(str(tmp_path / "absent.toml"))


def test_malformed_toml_is_fatal(xdg_home):
    (xdg_home / "ll.toml").write_text("[files\nbroken", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="failed to parse"):
        load_configuration()


def test_wrong_shape_is_fatal(xdg_home):
    (xdg_home / "ll.toml").write_text('files = "not a table"\n', encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_configuration()


def test_bad_items_are_discarded_with_warning(xdg_home, caplog):
    (xdg_home / "ll.toml").write_text(
        '[files]\n'
        '".ok" = "Y"\n'
        '".bad" = 3\n',
        encoding="utf-8",
    )
    with caplog.at_level("WARNING"):
        config = load_configuration()

    assert config.files[".ok"] == "Y"
    assert ".bad" not in config.files
    assert "must be a string" in caplog.text


def test_read_document_absent_returns_none(tmp_path):
    assert read_document(str(tmp_path / "nothing.toml")) is None


def test_parse_document_reports_source():
    with pytest.raises(ConfigurationError, match="my.toml"):
        parse_document("= nope", "my.toml")
