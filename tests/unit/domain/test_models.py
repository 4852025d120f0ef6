from __future__ import annotations

"""
Unit tests for the entry and listing data models.
"""

import os
import stat

from glyphls.domain.entry_models import Entry, EntryMetadata, split_extension
from glyphls.domain.listing_models import ListingOptions


def test_split_extension_lowercases():
    assert split_extension("Photo.JPG") == ("Photo", "jpg")
    assert split_extension("archive.tar.gz") == ("archive.tar", "gz")


def test_split_extension_leading_dot_has_no_extension():
    assert split_extension(".bashrc") == (".bashrc", "")
    assert split_extension("Makefile") == ("Makefile", "")


def test_entry_name_parts(tmp_path):
    path = tmp_path / "docs" / "README.MD"
    entry = Entry(path=str(path))

    assert entry.basename == "README.MD"
    assert entry.extension == "md"
    assert entry.parent_name == "docs"


def test_entry_basename_ignores_trailing_separator(tmp_path):
    entry = Entry(path=str(tmp_path / "pkg") + os.sep)
    assert entry.basename == "pkg"


def test_metadata_from_stat(tmp_path):
    target = tmp_path / "a.txt"
    target.write_text("hello", encoding="utf-8")

    meta = EntryMetadata.from_stat(os.stat(target))
    assert meta.is_dir is False
    assert meta.size == 5
    assert stat.S_ISREG(meta.mode)

    dir_meta = EntryMetadata.from_stat(os.stat(tmp_path))
    assert dir_meta.is_dir is True


def test_listing_options_defaults():
    options = ListingOptions()
    assert options.single_column is False
    assert options.show_all is False
    assert options.use_color is False
    assert options.terminal_width == 1
    assert options.detector is None
