from __future__ import annotations

"""
Column Layout Engine.

Packs an ordered list of pre-rendered lines into a terminal-width-constrained
grid. Cells are filled column-major so a listing reads top to bottom, and a
grid that would be a single row tall collapses to one entry per line.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from glyphls.core.layout.measure import visible_length
from glyphls.domain.constants import COLUMN_GAP

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GridLayout:
    """
    Geometry of a computed grid.

    Attributes:
        rows: Number of output rows.
        cols: Number of columns.
        col_width: Fixed cell width, gutter included.
    """
    rows: int
    cols: int
    col_width: int

    def index_at(self, row: int, col: int) -> int:
        """Column-major index of the entry shown at (row, col)."""
        return col * self.rows + row


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def compute_grid(lines: Sequence[str], terminal_width: int) -> GridLayout:
    """
    Compute rows, columns and cell width for a list of rendered lines.

    The column count uses floor division of the terminal width by the cell
    width, with a minimum of one column.

    Args:
        lines: Rendered lines (may contain ANSI sequences).
        terminal_width: Available terminal columns.

    Returns:
        GridLayout: The grid geometry.
    """
    list_len = len(lines)
    max_item_len = max((visible_length(line) for line in lines), default=0)
    col_width = max_item_len + COLUMN_GAP

    cols = max(1, terminal_width // col_width)
    rows = max(1, -(-list_len // cols))

    # A single row would smear a short listing across the screen.
    if rows == 1:
        cols = 1
        rows = list_len

    return GridLayout(rows=rows, cols=cols, col_width=col_width)


def layout_columns(lines: Sequence[str], terminal_width: int) -> List[str]:
    """
    Arrange rendered lines into grid rows.

    Every populated cell is right-padded to the cell width using its visible
    length; cells past the end of the list are skipped.

    Args:
        lines: Rendered lines in display order.
        terminal_width: Available terminal columns.

    Returns:
        List[str]: One string per output row.
    """
    grid = compute_grid(lines, terminal_width)
    logger.debug(
        "Grid layout: %d entries -> %d rows x %d cols (cell width %d, terminal width %d)",
        len(lines), grid.rows, grid.cols, grid.col_width, terminal_width,
    )

    out: List[str] = []
    for row in range(grid.rows):
        cells: List[str] = []
        for col in range(grid.cols):
            index = grid.index_at(row, col)
            if index >= len(lines):
                continue
            value = lines[index]
            padding = " " * (grid.col_width - visible_length(value))
            cells.append(f"{value}{padding}")
        out.append("".join(cells))
    return out


def single_column(lines: Sequence[str]) -> List[str]:
    """One entry per line, unpadded."""
    return list(lines)
