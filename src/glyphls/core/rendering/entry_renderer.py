from __future__ import annotations

"""
Entry Renderer.

Composes the icon resolver and the color formatter into one display string
per entry. Rendering is a pure function of the entry, the configuration and
the explicit rendering switches.
"""

from typing import Optional

from glyphls.core.rendering.colors import classify_dir, classify_file, format_with_color
from glyphls.core.rendering.executables import ExecutableDetector, default_executable_detector
from glyphls.core.rendering.icons import file_icon_queries, folder_icon_queries, resolve_icon
from glyphls.core.rendering.sizes import format_size
from glyphls.domain.config import ConfigurationModel
from glyphls.domain.constants import (
    CLASS_DEAD_LINK,
    CLASS_FILE_SIZE,
    DEAD_LINK_GLYPH,
    FALLBACK_FILE_GLYPH,
    FALLBACK_FOLDER_GLYPH,
)
from glyphls.domain.entry_models import Entry, EntryMetadata

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_entry(
        config: ConfigurationModel,
        entry: Entry,
        *,
        use_color: bool = False,
        detector: Optional[ExecutableDetector] = None,
) -> str:
    """
    Produce the display line for a single entry.

    Entries without metadata (broken links, stat failures) degrade to the
    dead-link rendering instead of raising.

    Args:
        config: Merged configuration.
        entry: Entry to render.
        use_color: Emit ANSI color sequences.
        detector: Executable detection strategy (platform default when None).

    Returns:
        str: The rendered line.
    """
    if entry.metadata is None:
        return build_dead_link_entry(config, entry, use_color=use_color)
    if entry.metadata.is_dir:
        return build_dir_entry(config, entry, use_color=use_color)

    detector = detector or default_executable_detector()
    return build_file_entry(config, entry, entry.metadata, detector, use_color=use_color)


def build_file_entry(
        config: ConfigurationModel,
        entry: Entry,
        metadata: EntryMetadata,
        detector: ExecutableDetector,
        *,
        use_color: bool,
) -> str:
    icon = resolve_icon(config.files, config.aliases, FALLBACK_FILE_GLYPH, file_icon_queries(entry))
    color_class = classify_file(entry, metadata, detector)
    size = format_size(metadata.size, config.size_units)

    name_part = format_with_color(config, f"  {icon} {entry.basename}", color_class, use_color=use_color)
    size_part = format_with_color(config, size, CLASS_FILE_SIZE, use_color=use_color)
    return f"{name_part} {size_part}"


def build_dir_entry(config: ConfigurationModel, entry: Entry, *, use_color: bool) -> str:
    icon = resolve_icon(config.folders, config.aliases, FALLBACK_FOLDER_GLYPH, folder_icon_queries(entry))
    return format_with_color(config, f"  {icon} {entry.basename}/", classify_dir(entry), use_color=use_color)


def build_dead_link_entry(config: ConfigurationModel, entry: Entry, *, use_color: bool) -> str:
    return format_with_color(config, f"  {DEAD_LINK_GLYPH} {entry.basename}", CLASS_DEAD_LINK, use_color=use_color)
