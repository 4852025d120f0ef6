from __future__ import annotations

"""
Executable Detection Strategies.

Provides the abstract interface used by the color classifier to decide whether
a file is executable, with one implementation per platform family. Tests inject
their own strategy instead of relying on the host platform.
"""

import os
from abc import ABC, abstractmethod
from typing import FrozenSet, Iterable

from glyphls.domain.constants import WINDOWS_EXECUTABLE_EXTENSIONS
from glyphls.domain.entry_models import EntryMetadata, split_extension


class ExecutableDetector(ABC):
    """
    Abstract base class for executable detection.
    """

    @abstractmethod
    def is_executable(self, path: str, metadata: EntryMetadata) -> bool:
        """
        Decide whether the entry should be classed as an executable file.

        Args:
            path: Entry path.
            metadata: Stat subset of the entry.

        Returns:
            bool: True if the entry is executable.
        """
        pass


class PosixExecutableDetector(ExecutableDetector):
    """Any of the user/group/other execute bits set."""

    def is_executable(self, path: str, metadata: EntryMetadata) -> bool:
        return bool(metadata.mode & 0o111)


class ExtensionExecutableDetector(ExecutableDetector):
    """Extension allowlist, for platforms without execute permission bits."""

    def __init__(self, extensions: Iterable[str] = WINDOWS_EXECUTABLE_EXTENSIONS):
        self._extensions: FrozenSet[str] = frozenset(e.lower().lstrip(".") for e in extensions)

    def is_executable(self, path: str, metadata: EntryMetadata) -> bool:
        _, ext = split_extension(os.path.basename(path))
        return ext in self._extensions


def default_executable_detector() -> ExecutableDetector:
    """Pick the strategy matching the host platform."""
    if os.name == "nt":
        return ExtensionExecutableDetector()
    return PosixExecutableDetector()
