from __future__ import annotations

"""
Filesystem Entry Data Models.

Transient value objects describing one path produced by the scanner. A missing
metadata block marks a broken symbolic link or an entry that could not be
stat'ed.
"""

import os
import stat
from dataclasses import dataclass
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class EntryMetadata:
    """
    Subset of the stat result needed by the renderer.

    Attributes:
        is_dir: True when the entry (after following links) is a directory.
        size: Size in bytes.
        mode: Raw st_mode permission and type bits.
    """
    is_dir: bool
    size: int
    mode: int = 0

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "EntryMetadata":
        return cls(is_dir=stat.S_ISDIR(st.st_mode), size=st.st_size, mode=st.st_mode)


@dataclass(frozen=True)
class Entry:
    """
    One filesystem path queued for rendering.

    Attributes:
        path: Path as produced by the scanner (absolute or relative).
        metadata: Stat subset, or None when unavailable.
    """
    path: str
    metadata: Optional[EntryMetadata] = None

    @property
    def basename(self) -> str:
        return os.path.basename(os.path.normpath(self.path))

    @property
    def extension(self) -> str:
        """Lowercase extension without the dot ('' when absent)."""
        return split_extension(self.basename)[1]

    @property
    def parent_name(self) -> str:
        """Name of the directory that contains the entry."""
        parent = os.path.dirname(os.path.abspath(self.path))
        return os.path.basename(parent)


def split_extension(basename: str) -> Tuple[str, str]:
    """
    Split a basename into stem and lowercase extension.

    Leading-dot names without a further dot (".bashrc") have no extension.
    """
    stem, ext = os.path.splitext(basename)
    return stem, ext[1:].lower()
