from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the glyph fallbacks, color vocabulary, configuration table names
and lookup tokens shared by the rendering pipeline and the configuration layer.
"""

from typing import FrozenSet, Tuple

# -----------------------------------------------------------------------------
# GLYPH FALLBACKS (Nerd Font code points)
# -----------------------------------------------------------------------------

FALLBACK_FILE_GLYPH = "\uea7b"
FALLBACK_FOLDER_GLYPH = "\ue5ff"
DEAD_LINK_GLYPH = "\uf481"

# Literal lookup tokens always seeded by the default document
FILE_KEY = "file"
FOLDER_KEY = "folder"

# -----------------------------------------------------------------------------
# COLOR VOCABULARY
# -----------------------------------------------------------------------------

CLASS_FILE = "file"
CLASS_HIDDEN = "hidden"
CLASS_EXECUTABLE_FILE = "executable_file"
CLASS_FILE_SIZE = "file_size"
CLASS_DIR = "dir"
CLASS_HIDDEN_DIR = "hidden_dir"
CLASS_DEAD_LINK = "dead_link"

DEFAULT_COLOR_NAME = "black"

COLOR_NAMES: FrozenSet[str] = frozenset({
    "black",
    "red", "green", "yellow", "blue", "magenta", "cyan", "white", "grey",
    "darkred", "darkgreen", "darkyellow", "darkblue", "darkmagenta",
    "darkcyan", "darkgrey",
})

# -----------------------------------------------------------------------------
# CONFIGURATION SCHEMA
# -----------------------------------------------------------------------------

CONFIG_FILE_NAME = "ll.toml"
DEFAULT_CONFIG_RESOURCE = "resources/default_config.toml"

TABLE_FILES = "files"
TABLE_FOLDERS = "folders"
TABLE_ALIASES = "aliases"
TABLE_COLORS = "colors"
TABLE_SETTINGS = "settings"
TABLE_IGNORE = "ignore"

IGNORE_FILES = "files"
IGNORE_FOLDERS = "folders"
IGNORE_CATEGORIES: Tuple[str, ...] = (IGNORE_FILES, IGNORE_FOLDERS)

SIZE_UNITS_KEY = "size_units"
SIZE_UNITS_BINARY = "binary"
SIZE_UNITS_SI = "si"
SIZE_UNITS: Tuple[str, ...] = (SIZE_UNITS_BINARY, SIZE_UNITS_SI)

# -----------------------------------------------------------------------------
# LISTING DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_PATTERN = "./*"
COLUMN_GAP = 2
FALLBACK_TERMINAL_WIDTH = 1

# Extensions treated as executable where permission bits are unavailable
WINDOWS_EXECUTABLE_EXTENSIONS: FrozenSet[str] = frozenset({"exe", "bat", "cmd"})
