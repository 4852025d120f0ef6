from __future__ import annotations

"""
Icon Resolver.

Maps an ordered list of candidate lookup keys to a display glyph, then applies
at most one alias substitution.
"""

from typing import Iterable, List, Mapping

from glyphls.domain.constants import FILE_KEY, FOLDER_KEY
from glyphls.domain.entry_models import Entry

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_icon(
        icons: Mapping[str, str],
        aliases: Mapping[str, str],
        fallback: str,
        queries: Iterable[str],
) -> str:
    """
    Return the glyph for the first candidate key present in the table.

    Args:
        icons: Lookup table (files or folders).
        aliases: One-hop substitution table.
        fallback: Glyph used when no candidate matches.
        queries: Candidate keys, most specific first.

    Returns:
        str: The resolved glyph. Never fails.
    """
    icon = fallback
    for query in queries:
        if query in icons:
            icon = icons[query]
            break

    # Only one level: an alias pointing at another alias is not followed.
    return aliases.get(icon, icon)


def file_icon_queries(entry: Entry) -> List[str]:
    """Candidate keys for a file: parent/name, name, .ext, "file"."""
    basename = entry.basename
    queries = [f"{entry.parent_name}/{basename}", basename]
    if entry.extension:
        queries.append(f".{entry.extension}")
    queries.append(FILE_KEY)
    return queries


def folder_icon_queries(entry: Entry) -> List[str]:
    """Candidate keys for a directory: name, .ext, "folder"."""
    queries = [entry.basename]
    if entry.extension:
        queries.append(f".{entry.extension}")
    queries.append(FOLDER_KEY)
    return queries
