from __future__ import annotations

"""
Ignore Filter.

Case-insensitive membership test of an entry's basename and extension against
the configured ignore lists. The whole filter is bypassed by the "show all"
switch.
"""

import logging
from typing import AbstractSet, Iterable, List

from glyphls.domain.config import ConfigurationModel
from glyphls.domain.entry_models import Entry

logger = logging.getLogger(__name__)


def is_visible(entry: Entry, ignore_files: AbstractSet[str], ignore_folders: AbstractSet[str]) -> bool:
    """
    Decide whether an entry survives the ignore lists.

    With metadata the entry type selects which list applies; without metadata
    the name is compared against every list.

    Args:
        entry: Entry to test.
        ignore_files: Lowercase file basenames and ".ext" values.
        ignore_folders: Lowercase directory basenames.

    Returns:
        bool: True if the entry should be displayed.
    """
    basename = entry.basename.lower()
    extname = f".{entry.extension}" if entry.extension else ""

    file_hit = basename in ignore_files or (bool(extname) and extname in ignore_files)

    if entry.metadata is not None:
        if entry.metadata.is_dir:
            return basename not in ignore_folders
        return not file_hit

    return not (file_hit or basename in ignore_folders)


def filter_entries(
        entries: Iterable[Entry],
        config: ConfigurationModel,
        *,
        show_all: bool = False,
) -> List[Entry]:
    """
    Drop ignored entries, preserving order.

    Args:
        entries: Candidate entries.
        config: Merged configuration holding the ignore lists.
        show_all: Skip filtering altogether.

    Returns:
        List[Entry]: Surviving entries.
    """
    entries = list(entries)
    if show_all:
        return entries

    kept = [e for e in entries if is_visible(e, config.ignore_files, config.ignore_folders)]
    if len(kept) != len(entries):
        logger.debug("Ignore lists suppressed %d of %d entries", len(entries) - len(kept), len(entries))
    return kept
