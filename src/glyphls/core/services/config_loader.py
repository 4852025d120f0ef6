from __future__ import annotations

"""
Configuration Loading Service.

Reads the packaged default document and the optional user override document,
validates both and produces the merged ConfigurationModel. Every failure here
is fatal and surfaces as ConfigurationError before any rendering starts.
"""

import logging
import os
import tomllib
from importlib import resources
from typing import Any, Dict, Optional

from glyphls.core.pipeline.validator import validate_document
from glyphls.domain.config import ConfigurationModel, merge_documents
from glyphls.domain.constants import DEFAULT_CONFIG_RESOURCE
from glyphls.domain.errors import ConfigurationError
from glyphls.infra.fs import get_config_file

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_configuration(config_path: Optional[str] = None) -> ConfigurationModel:
    """
    Build the configuration for this run.

    Args:
        config_path: Explicit override document. When None the discovered
                     location (XDG_CONFIG_HOME or ~/.config) is used and a
                     missing file simply means defaults only.

    Returns:
        ConfigurationModel: The merged configuration.

    Raises:
        ConfigurationError: Malformed documents, or an explicit path that
                            does not exist.
        HomeDirNotFoundError: If the default location cannot be resolved.
    """
    default_doc = load_default_document()

    if config_path is not None:
        if not os.path.isfile(config_path):
            raise ConfigurationError(f"configuration file not found: {config_path}")
        user_path = config_path
    else:
        user_path = get_config_file()

    user_doc = read_document(user_path)
    if user_doc is None:
        logger.debug("No user configuration at '%s'. Using defaults.", user_path)
    else:
        logger.debug("User configuration loaded from '%s'", user_path)

    return merge_documents(default_doc, user_doc)


def load_default_document() -> Dict[str, Any]:
    """Parse and strictly validate the packaged default document."""
    text = resources.files("glyphls").joinpath(DEFAULT_CONFIG_RESOURCE).read_text(encoding="utf-8")
    document, _ = validate_document(parse_document(text, "<default>"), strict=True, source="<default>")
    return document


def read_document(path: str) -> Optional[Dict[str, Any]]:
    """
    Read and validate a user override document.

    Returns:
        Optional[Dict[str, Any]]: The cleaned document, or None if absent.
    """
    if not os.path.exists(path):
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise ConfigurationError(f"unable to read configuration '{path}': {e}") from e

    document, _ = validate_document(parse_document(text, path), strict=False, source=path)
    return document


def parse_document(text: str, source: str) -> Dict[str, Any]:
    """Parse TOML text, mapping syntax errors to ConfigurationError."""
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"failed to parse {source}: {e}") from e
