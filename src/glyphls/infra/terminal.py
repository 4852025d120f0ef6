from __future__ import annotations

"""
Terminal Capability Queries.

Answers the two questions the listing needs from the output device: how wide
it is and whether it understands color sequences. Both are evaluated once at
startup by the CLI.
"""

import os
import shutil
import sys
from typing import Optional, TextIO

from glyphls.domain.constants import FALLBACK_TERMINAL_WIDTH

COLOR_AUTO = "auto"
COLOR_ALWAYS = "always"
COLOR_NEVER = "never"
COLOR_MODES = (COLOR_AUTO, COLOR_ALWAYS, COLOR_NEVER)


def get_terminal_width(fallback: int = FALLBACK_TERMINAL_WIDTH) -> int:
    """
    Terminal column count of stdout (honors $COLUMNS).

    Falls back to `fallback` when stdout is not a terminal, which makes the
    layout degrade to one entry per line.
    """
    columns = shutil.get_terminal_size(fallback=(fallback, 24)).columns
    return columns if columns > 0 else fallback


def stream_supports_color(stream: Optional[TextIO] = None) -> bool:
    """
    Capability query for ANSI colors on an output stream.

    Rules, first match wins:
    - NO_COLOR set: no color
    - FORCE_COLOR / CLICOLOR_FORCE set (and not "0"): color
    - TERM=dumb: no color
    - otherwise: color only on a TTY
    """
    stream = stream if stream is not None else sys.stdout

    if os.environ.get("NO_COLOR"):
        return False
    for var in ("FORCE_COLOR", "CLICOLOR_FORCE"):
        value = os.environ.get(var)
        if value and value != "0":
            return True
    if os.environ.get("TERM") == "dumb":
        return False

    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # Closed stream
        return False


def resolve_color_mode(mode: str, stream: Optional[TextIO] = None) -> bool:
    """Translate a --color mode into the boolean used by the formatter."""
    if mode == COLOR_ALWAYS:
        return True
    if mode == COLOR_NEVER:
        return False
    return stream_supports_color(stream)
