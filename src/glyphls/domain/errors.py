from __future__ import annotations

"""
Domain Error Taxonomy.

Fatal conditions raised by the configuration and scanning layers. Per-entry
metadata failures are not represented here: they degrade to a dead-link
rendering instead of propagating.
"""


class GlyphlsError(Exception):
    """Base class for every fatal error surfaced to the CLI."""


class ConfigurationError(GlyphlsError):
    """Malformed configuration document or missing required default keys."""


class PathNotFoundError(GlyphlsError):
    """The requested path (or the parent of a glob pattern) does not exist."""

    def __init__(self, path: str):
        super().__init__(f"couldn't find the specified path {path!r}")
        self.path = path


class HomeDirNotFoundError(GlyphlsError):
    """The user's home directory could not be resolved."""

    def __init__(self) -> None:
        super().__init__("unable to retrieve the home directory")
