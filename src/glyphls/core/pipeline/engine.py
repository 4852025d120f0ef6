from __future__ import annotations

"""
Core listing pipeline.

This module coordinates one listing run:
1. Applies the ignore lists (unless "show all" is requested).
2. Sorts entries by case-insensitive basename (stable).
3. Renders one line per entry.
4. Packs the lines into columns, or emits one per line.
"""

import logging
from typing import Iterable, List

from glyphls.core.layout.columns import layout_columns, single_column
from glyphls.core.rendering.entry_renderer import render_entry
from glyphls.core.rendering.executables import default_executable_detector
from glyphls.core.services.ignore_filter import filter_entries
from glyphls.domain.config import ConfigurationModel
from glyphls.domain.entry_models import Entry
from glyphls.domain.listing_models import ListingOptions, ListingResult

logger = logging.getLogger(__name__)


def build_listing(
        entries: Iterable[Entry],
        config: ConfigurationModel,
        options: ListingOptions,
) -> ListingResult:
    """
    Execute the full rendering pipeline over pre-collected entries.

    Args:
        entries: Entries in arbitrary order.
        config: Merged configuration.
        options: Runtime switches resolved at startup.

    Returns:
        ListingResult: Output rows and the displayed entries in order.
    """
    visible = filter_entries(entries, config, show_all=options.show_all)
    ordered = sort_entries(visible)

    detector = options.detector or default_executable_detector()
    rendered = [
        render_entry(config, entry, use_color=options.use_color, detector=detector)
        for entry in ordered
    ]

    if options.single_column:
        lines = single_column(rendered)
    else:
        lines = layout_columns(rendered, options.terminal_width)

    logger.debug("Listing built: %d entries, %d output rows", len(ordered), len(lines))
    return ListingResult(lines=lines, entries=ordered)


def sort_entries(entries: Iterable[Entry]) -> List[Entry]:
    """Stable sort by lowercase basename."""
    return sorted(entries, key=lambda entry: entry.basename.lower())
