"""
Global keyword tables: merging registries and resolving labels.

    table = merge_registries([roles, statuses])
    table = merge_registries({"userRole": {...}, "orderStatus": OrderStatus})
    resolve_label(table, "USER_ROLE_ADMIN")                  → "Admin"
    resolve_label(table, "NOPE", fallback="Unknown")          → "Unknown"
    resolve_label(table, "NOPE", strict=True)                 → KeyNotFoundError

Sources may be Registries or raw key → Entry tables (including a previous
merge result), so merges compose.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional

from vocab.errors import DuplicateKeyError, InvalidInputError, KeyNotFoundError
from vocab.registry import LabelFormatter, Registry, build_registry

logger = logging.getLogger(__name__)


def _entries_of(source) -> Mapping:
    """Return the key → Entry mapping behind a Registry or raw table."""
    if isinstance(source, Registry):
        return source.map
    if isinstance(source, Mapping):
        return source
    raise InvalidInputError(
        f"source must be a Registry or a key → Entry mapping, "
        f"got {type(source).__name__}"
    )


def _merge_sources(sources) -> Mapping:
    table = {}
    for source in sources:
        for key, entry in _entries_of(source).items():
            if key in table:
                raise DuplicateKeyError(
                    key, f"Keyword key already exists in map: {key}"
                )
            table[key] = entry
    logger.debug("Merged %d keyword entries", len(table))
    return MappingProxyType(table)


def merge_registries(sources_or_groups, *,
                     format_label: Optional[LabelFormatter] = None) -> Mapping:
    """Merge registries into one read-only key → Entry table.

    Accepts either:
    - a sequence of Registries / raw tables, merged left to right, or
    - a mapping of category → definitions (or Enum subclass); each group is
      built with build_registry using *format_label*, then merged.

    Raises DuplicateKeyError on the first key seen twice; no partial table
    is returned. Empty input yields an empty table.
    """
    if isinstance(sources_or_groups, Mapping):
        registries = [
            build_registry(category, definitions, format_label=format_label)
            for category, definitions in sources_or_groups.items()
        ]
        return _merge_sources(registries)

    if format_label is not None:
        raise InvalidInputError(
            "format_label only applies when merging category groups"
        )
    return _merge_sources(sources_or_groups)


def resolve_label(source, key: str, *, fallback: Optional[str] = None,
                  strict: bool = False, debug: bool = False) -> Optional[str]:
    """Look up the label for *key* in a Registry or table.

    Missing keys, in order:
    1. debug=True logs a warning naming the key
    2. a fallback other than None is returned (even with strict=True)
    3. strict=True raises KeyNotFoundError
    4. otherwise None
    """
    entries = _entries_of(source)
    entry = entries.get(key)
    if entry is not None:
        return entry.label

    if debug:
        logger.warning('Keyword label not found for key: "%s"', key)

    if fallback is not None:
        return fallback
    if strict:
        raise KeyNotFoundError(key)
    return None


def label_map(source) -> Mapping:
    """Return a read-only key → label view of a Registry or table."""
    if isinstance(source, Registry):
        return source.label_map
    return MappingProxyType(
        {key: entry.label for key, entry in _entries_of(source).items()}
    )
