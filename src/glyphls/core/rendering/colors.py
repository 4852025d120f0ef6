from __future__ import annotations

"""
Color Classifier and Formatter.

Assigns semantic color classes to entries and wraps text in the ANSI sequence
configured for that class. Color capability is decided once by the caller and
passed in explicitly, which keeps formatting a pure function.
"""

from typing import Dict

from colorama import Fore

from glyphls.domain.config import ConfigurationModel
from glyphls.domain.constants import (
    CLASS_DIR,
    CLASS_EXECUTABLE_FILE,
    CLASS_FILE,
    CLASS_HIDDEN,
    CLASS_HIDDEN_DIR,
    DEFAULT_COLOR_NAME,
)
from glyphls.domain.entry_models import Entry, EntryMetadata
from glyphls.core.rendering.executables import ExecutableDetector

# -----------------------------------------------------------------------------
# PALETTE
# -----------------------------------------------------------------------------

# Plain names are the bright variants, "dark" names the normal ones.
PALETTE: Dict[str, str] = {
    "black": Fore.BLACK,
    "red": Fore.LIGHTRED_EX,
    "green": Fore.LIGHTGREEN_EX,
    "yellow": Fore.LIGHTYELLOW_EX,
    "blue": Fore.LIGHTBLUE_EX,
    "magenta": Fore.LIGHTMAGENTA_EX,
    "cyan": Fore.LIGHTCYAN_EX,
    "white": Fore.LIGHTWHITE_EX,
    "grey": Fore.WHITE,
    "darkred": Fore.RED,
    "darkgreen": Fore.GREEN,
    "darkyellow": Fore.YELLOW,
    "darkblue": Fore.BLUE,
    "darkmagenta": Fore.MAGENTA,
    "darkcyan": Fore.CYAN,
    "darkgrey": Fore.LIGHTBLACK_EX,
}

# -----------------------------------------------------------------------------
# FORMATTING
# -----------------------------------------------------------------------------

def get_color_code(color_name: str) -> str:
    """Translate a palette name (case-insensitive) into its escape sequence."""
    return PALETTE.get(color_name.lower(), PALETTE[DEFAULT_COLOR_NAME])


def format_with_color(
        config: ConfigurationModel,
        message: str,
        color_class: str,
        *,
        use_color: bool,
) -> str:
    """
    Wrap a message with the color configured for a color class.

    Args:
        config: Merged configuration.
        message: Text to colorize.
        color_class: Semantic class name (e.g. "dir", "dead_link").
        use_color: Whether the output destination supports color.

    Returns:
        str: The colorized message, or the message unchanged without color.
    """
    if not use_color:
        return message

    color_name = config.colors.get(color_class, DEFAULT_COLOR_NAME)
    return f"{get_color_code(color_name)}{message}{Fore.RESET}"


# -----------------------------------------------------------------------------
# CLASSIFICATION
# -----------------------------------------------------------------------------

def classify_file(entry: Entry, metadata: EntryMetadata, detector: ExecutableDetector) -> str:
    if detector.is_executable(entry.path, metadata):
        return CLASS_EXECUTABLE_FILE
    if entry.basename.startswith("."):
        return CLASS_HIDDEN
    return CLASS_FILE


def classify_dir(entry: Entry) -> str:
    return CLASS_HIDDEN_DIR if entry.basename.startswith(".") else CLASS_DIR
