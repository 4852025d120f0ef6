from __future__ import annotations

"""
Human-readable byte sizes.

Compact notation without a space between number and unit (512B, 4.2KiB,
1.5MB) in either binary (base 1024) or SI (base 1000) units.
"""

from glyphls.domain.constants import SIZE_UNITS_SI

_BINARY_PREFIXES = "KMGTPE"
_SI_PREFIXES = "kMGTPE"


def format_size(num_bytes: int, units: str = "binary") -> str:
    """
    Format a byte count with one decimal in the largest fitting unit.

    Args:
        num_bytes: Size in bytes (negative values are clamped to 0).
        units: "binary" for KiB/MiB/... or "si" for kB/MB/...

    Returns:
        str: Compact size string, e.g. "4.2KiB".
    """
    si = units == SIZE_UNITS_SI
    base = 1000 if si else 1024
    prefixes = _SI_PREFIXES if si else _BINARY_PREFIXES
    suffix = "B" if si else "iB"

    num_bytes = max(0, int(num_bytes))
    if num_bytes < base:
        return f"{num_bytes}B"

    exp = 0
    while exp < len(prefixes) and num_bytes >= base ** (exp + 1):
        exp += 1

    value = num_bytes / base ** exp
    return f"{value:.1f}{prefixes[exp - 1]}{suffix}"
