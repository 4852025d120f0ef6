from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: small configuration documents, merged models and a
   deterministic executable detector.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from glyphls.core.rendering.executables import ExecutableDetector  # noqa: E402
from glyphls.domain.config import ConfigurationModel, merge_documents  # noqa: E402
from glyphls.domain.entry_models import EntryMetadata  # noqa: E402


# -----------------------------------------------------------------------------
# Test Doubles
# -----------------------------------------------------------------------------
class FakeDetector(ExecutableDetector):
    """Executable iff the basename is listed, regardless of the host platform."""

    def __init__(self, *names: str):
        self.names = set(names)

    def is_executable(self, path: str, metadata: EntryMetadata) -> bool:
        return os.path.basename(path) in self.names


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def default_doc() -> Dict[str, Any]:
    """
    Minimal default document with readable ASCII "glyphs".

    Mirrors the layout of resources/default_config.toml.
    """
    return {
        "aliases": {"python": "PY", "git": "GIT"},
        "files": {
            "file": "F",
            ".py": "python",
            ".gitignore": "git",
            "Makefile": "MK",
            "ssh/config": "KEY",
        },
        "folders": {"folder": "D", "node_modules": "NM", ".git": "git"},
        "colors": {
            "file": "grey",
            "hidden": "darkgrey",
            "executable_file": "green",
            "file_size": "darkgrey",
            "dir": "blue",
            "hidden_dir": "darkblue",
            "dead_link": "red",
        },
        "settings": {"size_units": "binary"},
        "ignore": {
            "files": [".DS_Store", ".pyc"],
            "folders": ["node_modules", "__pycache__"],
        },
    }


@pytest.fixture
def config(default_doc: Dict[str, Any]) -> ConfigurationModel:
    """Merged model built from the minimal default document only."""
    return merge_documents(default_doc)


@pytest.fixture
def fake_detector() -> FakeDetector:
    return FakeDetector("run.sh")
