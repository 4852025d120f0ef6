from __future__ import annotations

"""
Entry Discovery Service.

Turns the path argument into a list of entries: home expansion, promotion of a
directory argument to "<dir>/*", glob expansion and metadata collection.
Metadata failures are recorded as missing metadata, never raised.
"""

import glob
import logging
import os
from typing import Optional

from glyphls.domain.constants import DEFAULT_PATTERN
from glyphls.domain.entry_models import Entry, EntryMetadata
from glyphls.domain.errors import PathNotFoundError
from glyphls.domain.listing_models import ScanResult
from glyphls.infra.fs import expand_home

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def scan_entries(path_arg: Optional[str] = None) -> ScanResult:
    """
    Collect the entries designated by a path or glob pattern.

    A pattern that matches nothing yields an empty result, literal or not.

    Args:
        path_arg: Entry path or glob pattern; defaults to "./*".

    Returns:
        ScanResult: Pattern, canonical base directory and collected entries.

    Raises:
        PathNotFoundError: If the pattern's parent directory does not exist.
    """
    pattern = resolve_pattern(path_arg)

    parent = os.path.dirname(pattern) or os.curdir
    if not os.path.isdir(parent):
        raise PathNotFoundError(pattern)
    base_dir = os.path.realpath(parent)

    paths = [p for p in glob.glob(pattern, include_hidden=True) if not p.endswith(".")]

    entries = [Entry(path=p, metadata=read_metadata(p)) for p in paths]
    logger.debug("Scanned '%s' (base '%s'): %d entries", pattern, base_dir, len(entries))

    return ScanResult(pattern=pattern, base_dir=base_dir, entries=entries)


def resolve_pattern(path_arg: Optional[str]) -> str:
    """
    Normalize the path argument into a glob pattern.

    A path naming an existing directory lists its contents.
    """
    pattern = expand_home(path_arg or DEFAULT_PATTERN)
    if os.path.isdir(pattern):
        pattern = os.path.join(pattern, "*")
    return pattern


def read_metadata(path: str) -> Optional[EntryMetadata]:
    """
    Stat a path, following symbolic links.

    Returns:
        Optional[EntryMetadata]: None for broken links or unreadable entries.
    """
    try:
        return EntryMetadata.from_stat(os.stat(path))
    except OSError as e:
        logger.debug("unable to retrieve metadata for '%s': %s", path, e)
        return None
