from __future__ import annotations

"""
Listing Domain Data Models.

Defines the options and result structures exchanged between the CLI layer,
the scanner and the listing engine.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from glyphls.domain.constants import FALLBACK_TERMINAL_WIDTH
from glyphls.domain.entry_models import Entry

if TYPE_CHECKING:
    from glyphls.core.rendering.executables import ExecutableDetector

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ListingOptions:
    """
    Runtime switches resolved once at startup.

    Attributes:
        single_column: Print one entry per line, unpadded.
        show_all: Disable the ignore lists.
        use_color: Emit ANSI color sequences.
        terminal_width: Column budget for the grid layout.
        detector: Executable detection strategy (platform default when None).
    """
    single_column: bool = False
    show_all: bool = False
    use_color: bool = False
    terminal_width: int = FALLBACK_TERMINAL_WIDTH
    detector: Optional["ExecutableDetector"] = None


@dataclass(frozen=True)
class ScanResult:
    """
    Entries collected for a path argument.

    Attributes:
        pattern: Final glob pattern after home and directory expansion.
        base_dir: Canonical directory the pattern is rooted at.
        entries: Collected entries in glob order.
    """
    pattern: str
    base_dir: str
    entries: List[Entry] = field(default_factory=list)


@dataclass(frozen=True)
class ListingResult:
    """
    Output of one listing run.

    Attributes:
        lines: Output rows, ready to be written to stdout.
        entries: Entries that survived filtering, in display order.
    """
    lines: List[str] = field(default_factory=list)
    entries: List[Entry] = field(default_factory=list)
