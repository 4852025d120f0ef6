from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the home directory, the user configuration location and `~`
shortcuts. Acts as the single place where environment variables drive
filesystem locations.
"""

import os
from pathlib import Path

from glyphls.domain.constants import CONFIG_FILE_NAME
from glyphls.domain.errors import HomeDirNotFoundError

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_home_dir() -> str:
    """
    Resolve the current user's home directory.

    Raises:
        HomeDirNotFoundError: If the platform cannot determine it.
    """
    try:
        return str(Path.home())
    except (RuntimeError, KeyError) as e:
        raise HomeDirNotFoundError() from e


def get_config_dir() -> str:
    """
    Resolve the configuration directory.

    Standards:
    - $XDG_CONFIG_HOME when set
    - ~/.config otherwise

    Returns:
        str: Absolute path of the configuration directory.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return config_home
    return os.path.join(get_home_dir(), ".config")


def get_config_file() -> str:
    """Absolute path of the user override document (may not exist)."""
    return os.path.join(get_config_dir(), CONFIG_FILE_NAME)


def expand_home(path: str) -> str:
    """
    Expand a leading "~" or "~/" into the home directory.

    Other tilde forms ("~user") are returned unchanged.
    """
    if path == "~":
        return get_home_dir()
    if path.startswith("~/") or path.startswith("~" + os.sep):
        return os.path.join(get_home_dir(), path[2:])
    return path
