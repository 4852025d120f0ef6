from __future__ import annotations

"""
Configuration Domain Model.

Defines the immutable, fully-resolved lookup tables consumed by the rendering
pipeline and the per-table merge policy used to layer a user override document
on top of the built-in default document.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional

from glyphls.domain.constants import (
    FILE_KEY,
    FOLDER_KEY,
    IGNORE_CATEGORIES,
    IGNORE_FILES,
    IGNORE_FOLDERS,
    SIZE_UNITS,
    SIZE_UNITS_BINARY,
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

# -----------------------------------------------------------------------------
# MERGE POLICIES
# -----------------------------------------------------------------------------

class MergePolicy(Enum):
    """
    Strategy applied to every key of a table supplied by the override document.

    EXTEND: scalar values are replaced key by key. List values would be
            unioned (defaults first), but the validator reduces every EXTEND
            table to string values, so that branch is only for list-valued
            tables added later.
    REPLACE: the override value replaces the default value wholesale.

    In both cases keys missing from the override keep their default value.
    """
    EXTEND = "extend"
    REPLACE = "replace"


TABLE_POLICIES: Dict[str, MergePolicy] = {
    TABLE_FILES: MergePolicy.EXTEND,
    TABLE_FOLDERS: MergePolicy.EXTEND,
    TABLE_ALIASES: MergePolicy.EXTEND,
    TABLE_COLORS: MergePolicy.EXTEND,
    TABLE_SETTINGS: MergePolicy.EXTEND,
    TABLE_IGNORE: MergePolicy.REPLACE,
}

# Tables the default document may omit
_OPTIONAL_TABLES: FrozenSet[str] = frozenset({TABLE_SETTINGS})


# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ConfigurationModel:
    """
    Read-only lookup tables for one process invocation.

    Attributes:
        files: Icon lookup for files (name, parent/name, .ext, "file").
        folders: Icon lookup for directories (name, .ext, "folder").
        aliases: One-hop glyph substitution table.
        colors: Color class name to palette color name.
        ignore_files: Lowercase basenames and extensions hidden by default.
        ignore_folders: Lowercase directory names hidden by default.
        size_units: "binary" (KiB) or "si" (kB) size formatting.
    """
    files: Mapping[str, str]
    folders: Mapping[str, str]
    aliases: Mapping[str, str]
    colors: Mapping[str, str]
    ignore_files: FrozenSet[str]
    ignore_folders: FrozenSet[str]
    size_units: str = SIZE_UNITS_BINARY

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the model back into the document layout (used by --dump-config)."""
        return {
            TABLE_ALIASES: dict(self.aliases),
            TABLE_FILES: dict(self.files),
            TABLE_FOLDERS: dict(self.folders),
            TABLE_COLORS: dict(self.colors),
            TABLE_SETTINGS: {SIZE_UNITS_KEY: self.size_units},
            TABLE_IGNORE: {
                IGNORE_FILES: sorted(self.ignore_files),
                IGNORE_FOLDERS: sorted(self.ignore_folders),
            },
        }


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def merge_tables(
        default: Mapping[str, Any],
        override: Optional[Mapping[str, Any]],
        policy: MergePolicy,
) -> Dict[str, Any]:
    """
    Merge one override table into its default counterpart.

    Args:
        default: Table taken from the default document.
        override: Table taken from the user document (may be None).
        policy: Merge strategy for this table.

    Returns:
        Dict[str, Any]: A new dictionary; inputs are left untouched.
    """
    merged: Dict[str, Any] = dict(default)
    if not override:
        return merged

    for key, value in override.items():
        merged[key] = _merge_value(merged.get(key), value, policy)
    return merged


def merge_documents(
        default_doc: Mapping[str, Any],
        user_doc: Optional[Mapping[str, Any]] = None,
) -> ConfigurationModel:
    """
    Build the ConfigurationModel from the default and optional user documents.

    Every table is merged according to TABLE_POLICIES, so user documents can
    add or replace keys but never delete the defaults.

    Args:
        default_doc: Parsed built-in default document.
        user_doc: Parsed user override document, if any.

    Returns:
        ConfigurationModel: The immutable merged configuration.

    Raises:
        ConfigurationError: If the default document lacks a required table or key.
    """
    user_doc = user_doc or {}
    merged: Dict[str, Dict[str, Any]] = {}

    for table, policy in TABLE_POLICIES.items():
        default_table = default_doc.get(table)
        if default_table is None:
            if table not in _OPTIONAL_TABLES:
                raise ConfigurationError(f"default configuration is missing the [{table}] table")
            default_table = {}
        merged[table] = merge_tables(default_table, user_doc.get(table), policy)

    logger.debug(
        "Configuration merged: %d file keys, %d folder keys, %d aliases, %d colors",
        len(merged[TABLE_FILES]),
        len(merged[TABLE_FOLDERS]),
        len(merged[TABLE_ALIASES]),
        len(merged[TABLE_COLORS]),
    )
    return _build_model(merged)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _merge_value(default_value: Any, override_value: Any, policy: MergePolicy) -> Any:
    if policy is MergePolicy.REPLACE:
        return _copy_value(override_value)

    if isinstance(default_value, list) and isinstance(override_value, list):
        out: List[Any] = list(default_value)
        out.extend(v for v in override_value if v not in out)
        return out
    return _copy_value(override_value)


def _copy_value(value: Any) -> Any:
    return list(value) if isinstance(value, list) else value


def _build_model(merged: Dict[str, Dict[str, Any]]) -> ConfigurationModel:
    files = merged[TABLE_FILES]
    folders = merged[TABLE_FOLDERS]
    ignore = merged[TABLE_IGNORE]

    if FILE_KEY not in files:
        raise ConfigurationError(f"[{TABLE_FILES}] must define the '{FILE_KEY}' fallback key")
    if FOLDER_KEY not in folders:
        raise ConfigurationError(f"[{TABLE_FOLDERS}] must define the '{FOLDER_KEY}' fallback key")
    for category in IGNORE_CATEGORIES:
        if category not in ignore:
            raise ConfigurationError(f"[{TABLE_IGNORE}] must define '{category}'")

    size_units = merged[TABLE_SETTINGS].get(SIZE_UNITS_KEY, SIZE_UNITS_BINARY)
    if size_units not in SIZE_UNITS:
        size_units = SIZE_UNITS_BINARY

    return ConfigurationModel(
        files=MappingProxyType(dict(files)),
        folders=MappingProxyType(dict(folders)),
        aliases=MappingProxyType(dict(merged[TABLE_ALIASES])),
        colors=MappingProxyType(dict(merged[TABLE_COLORS])),
        ignore_files=_lowered(ignore[IGNORE_FILES]),
        ignore_folders=_lowered(ignore[IGNORE_FOLDERS]),
        size_units=size_units,
    )


def _lowered(values: Iterable[str]) -> FrozenSet[str]:
    return frozenset(v.lower() for v in values)
