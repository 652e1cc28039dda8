"""
Keyword vocabularies: stable CATEGORY_VALUE keys mapped to display labels.

Users import the builders, the merge/lookup helpers, and the error types.
Built registries and merged tables are immutable.
"""

from vocab.enums import adapt_enumeration
from vocab.errors import (
    DuplicateKeyError,
    InvalidInputError,
    KeyNotFoundError,
    RegistryError,
)
from vocab.normalize import normalize_category, normalize_keyword_value, normalize_token
from vocab.registry import (
    Entry,
    KeywordDefinition,
    Registry,
    build_enum_registry,
    build_keyword_key,
    build_registry,
    default_format_label,
)
from vocab.table import label_map, merge_registries, resolve_label

__all__ = [
    "adapt_enumeration",
    "build_enum_registry",
    "build_keyword_key",
    "build_registry",
    "default_format_label",
    "label_map",
    "merge_registries",
    "normalize_category",
    "normalize_keyword_value",
    "normalize_token",
    "resolve_label",
    "Entry",
    "KeywordDefinition",
    "Registry",
    "RegistryError",
    "InvalidInputError",
    "DuplicateKeyError",
    "KeyNotFoundError",
]
