from __future__ import annotations

"""
Visible-Length Measurer.

Computes the printable width of rendered lines so that ANSI color sequences do
not desynchronize column padding.
"""

import re

ANSI_COLOR_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove every SGR color/reset sequence from the text."""
    return ANSI_COLOR_RE.sub("", text)


def visible_length(text: str) -> int:
    """Count code points left once color sequences are removed."""
    return len(strip_ansi(text))
