from __future__ import annotations

"""
Configuration Document Validation Service.

Gatekeeper between parsed TOML documents and the configuration merge. Ensures
every table has the expected shape, discards malformed items with a warning
(or raises in strict mode) and rejects structurally invalid documents.
"""

import logging
from typing import Any, Dict, List, Mapping, Tuple

from glyphls.domain.constants import (
    COLOR_NAMES,
    IGNORE_CATEGORIES,
    SIZE_UNITS,
    SIZE_UNITS_KEY,
    TABLE_ALIASES,
    TABLE_COLORS,
    TABLE_FILES,
    TABLE_FOLDERS,
    TABLE_IGNORE,
    TABLE_SETTINGS,
)
from glyphls.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

_STRING_TABLES = (TABLE_FILES, TABLE_FOLDERS, TABLE_ALIASES, TABLE_COLORS, TABLE_SETTINGS)
_KNOWN_TABLES = frozenset(_STRING_TABLES + (TABLE_IGNORE,))


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_document(
        document: Any,
        *,
        strict: bool = False,
        source: str = "<config>",
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a parsed configuration document.

    Args:
        document: Parsed TOML document.
        strict: If True, item-level problems raise instead of being discarded.
        source: Document identifier used in messages.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The cleaned document and warnings.

    Raises:
        ConfigurationError: On structural problems (a table that is not a
                            table, an ignore list that is not a list) or on
                            any problem in strict mode.
    """
    warnings: List[str] = []

    if not isinstance(document, Mapping):
        raise ConfigurationError(
            f"{source}: expected a table at top level, received {type(document).__name__}"
        )

    clean: Dict[str, Any] = {}

    for key, value in document.items():
        if key not in _KNOWN_TABLES:
            _reject(f"{source}: unknown table [{key}] ignored.", warnings, strict)
            continue

        if key == TABLE_IGNORE:
            clean[key] = _clean_ignore(value, source, warnings, strict)
        else:
            clean[key] = _clean_string_table(key, value, source, warnings, strict)

    if TABLE_COLORS in clean:
        _check_color_names(clean[TABLE_COLORS], source, warnings, strict)
    if TABLE_SETTINGS in clean:
        _check_settings(clean[TABLE_SETTINGS], source, warnings, strict)

    for w in warnings:
        logger.warning(w)

    return clean, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TABLE SHAPES
# -----------------------------------------------------------------------------

def _clean_string_table(
        table: str,
        value: Any,
        source: str,
        warnings: List[str],
        strict: bool,
) -> Dict[str, str]:
    """Ensure a table maps strings to strings."""
    if not isinstance(value, Mapping):
        raise ConfigurationError(
            f"{source}: [{table}] must be a table, received {type(value).__name__}"
        )

    out: Dict[str, str] = {}
    for k, v in value.items():
        if isinstance(v, str):
            out[k] = v
        else:
            _reject(
                f"{source}: [{table}] '{k}' must be a string, received {type(v).__name__}. Entry discarded.",
                warnings,
                strict,
            )
    return out


def _clean_ignore(value: Any, source: str, warnings: List[str], strict: bool) -> Dict[str, List[str]]:
    """Ensure [ignore] only holds known categories mapped to lists of strings."""
    if not isinstance(value, Mapping):
        raise ConfigurationError(
            f"{source}: [{TABLE_IGNORE}] must be a table, received {type(value).__name__}"
        )

    out: Dict[str, List[str]] = {}
    for category, items in value.items():
        if category not in IGNORE_CATEGORIES:
            _reject(f"{source}: unknown ignore category '{category}' ignored.", warnings, strict)
            continue
        if not isinstance(items, list):
            raise ConfigurationError(
                f"{source}: {TABLE_IGNORE}.{category} must be a list, received {type(items).__name__}"
            )

        names: List[str] = []
        for i, item in enumerate(items):
            if isinstance(item, str) and item.strip():
                names.append(item.strip())
            else:
                _reject(
                    f"{source}: invalid item in '{TABLE_IGNORE}.{category}[{i}]': expected str. Item discarded.",
                    warnings,
                    strict,
                )
        out[category] = names
    return out


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN CHECKS
# -----------------------------------------------------------------------------

def _check_color_names(colors: Dict[str, str], source: str, warnings: List[str], strict: bool) -> None:
    """Unknown palette names are kept but reported; they render as black."""
    for color_class, name in colors.items():
        if name.lower() not in COLOR_NAMES:
            _reject(
                f"{source}: color '{name}' for '{color_class}' is not in the palette; black will be used.",
                warnings,
                strict,
            )


def _check_settings(settings: Dict[str, str], source: str, warnings: List[str], strict: bool) -> None:
    units = settings.get(SIZE_UNITS_KEY)
    if units is not None and units not in SIZE_UNITS:
        _reject(
            f"{source}: {TABLE_SETTINGS}.{SIZE_UNITS_KEY} must be one of {', '.join(SIZE_UNITS)}. Using default.",
            warnings,
            strict,
        )
        del settings[SIZE_UNITS_KEY]


def _reject(msg: str, warnings: List[str], strict: bool) -> None:
    if strict:
        raise ConfigurationError(msg)
    warnings.append(msg)
