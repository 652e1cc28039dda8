"""
Keyword Registry: collision-free CATEGORY_VALUE keys with display labels.

A Registry is built in one call from a category name and a set of named
definitions, and is immutable afterwards:

    roles = build_registry("userRole", {
        "admin": "Admin",
        "member": "Member",
        "guest": KeywordDefinition(label="Visitor"),
        "billing": {"value": "billing-admin"},
    })
    roles.keys["admin"]            → "USER_ROLE_ADMIN"
    roles.label_map["USER_ROLE_BILLING_ADMIN"] → "Billing Admin"

Definition forms:
  A. str                  value = entry name, label = the string
  B. KeywordDefinition    value = .value or entry name,
                          label = .label or format_label(value, name)
  C. {"value", "label"}   literal spelling of B

Enumerations (Enum subclasses, or name → constant mappings) go through
build_enum_registry: value = member name, label = str(member value) unless a
format_label is given.
"""

import dataclasses
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Callable, Optional

from vocab.enums import adapt_enumeration, is_enumeration_class
from vocab.errors import DuplicateKeyError, InvalidInputError, KeyNotFoundError
from vocab.normalize import normalize_category, normalize_keyword_value

logger = logging.getLogger(__name__)

# (normalized_value, entry_name) → label
LabelFormatter = Callable[[str, str], str]

_DEFINITION_FIELDS = ("value", "label")


def default_format_label(normalized_value: str, name: Optional[str] = None) -> str:
    """Title-case a normalized value: "TRYING_TO_QUIT" → "Trying To Quit"."""
    segments = [s for s in normalized_value.lower().split("_") if s]
    return " ".join(s[:1].upper() + s[1:] for s in segments)


@dataclasses.dataclass(frozen=True)
class KeywordDefinition:
    """Structured definition; both fields optional."""
    value: Optional[str] = None
    label: Optional[str] = None

    @classmethod
    def from_mapping(cls, name: str, data: Mapping) -> "KeywordDefinition":
        unknown = [k for k in data if k not in _DEFINITION_FIELDS]
        if unknown:
            raise InvalidInputError(
                f"Definition '{name}': unknown field(s) {unknown}, "
                f"expected only {list(_DEFINITION_FIELDS)}"
            )
        return cls(value=data.get("value"), label=data.get("label"))


@dataclasses.dataclass(frozen=True)
class Entry:
    """One keyword: the caller's name, its composite key, and its label."""
    name: str
    key: str
    category: str
    value: str
    label: str


@dataclasses.dataclass(frozen=True)
class Registry:
    """
    All entries of one category, plus lookup views.

    keys       name → key
    label_map  key → label
    entries    Entry tuple in input order
    map        key → Entry
    """
    category: str
    keys: Mapping
    label_map: Mapping
    entries: tuple
    map: Mapping

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __contains__(self, key):
        return key in self.map

    def has(self, key: str) -> bool:
        """Check if a composite key belongs to this registry."""
        return key in self.map

    def get(self, key: str) -> Entry:
        """Get the entry for a composite key.

        Raises KeyNotFoundError if absent.
        """
        if key not in self.map:
            raise KeyNotFoundError(
                key, f"Keyword key '{key}' is not defined in {self.category}"
            )
        return self.map[key]

    def key_for(self, name: str) -> str:
        """Return the composite key built for the entry called *name*."""
        if name not in self.keys:
            raise KeyNotFoundError(
                name, f"No entry named '{name}' in {self.category}"
            )
        return self.keys[name]


def build_keyword_key(category: str, value: str) -> str:
    """Compose CATEGORY_VALUE from two raw tokens. No uniqueness check."""
    return f"{normalize_category(category)}_{normalize_keyword_value(value)}"


def _coerce_definition(name, definition):
    """Return a str or KeywordDefinition for one declarative entry."""
    if isinstance(definition, (str, KeywordDefinition)):
        return definition
    if isinstance(definition, Mapping):
        return KeywordDefinition.from_mapping(name, definition)
    raise InvalidInputError(
        f"Definition '{name}': expected a label string, KeywordDefinition "
        f"or mapping, got {type(definition).__name__}"
    )


def _check_name(name):
    if not isinstance(name, str):
        raise InvalidInputError(
            f"Entry names must be strings, got {type(name).__name__} {name!r}"
        )


def _assemble(category: str, rows) -> Registry:
    """Build a Registry from (name, raw_value, label_fn) rows.

    label_fn receives the normalized value and returns the label.
    The whole call fails on the first duplicate key; nothing partial escapes.
    """
    normalized_category = normalize_category(category)
    seen = set()
    entries = []

    for name, raw_value, label_fn in rows:
        normalized_value = normalize_keyword_value(raw_value)
        key = f"{normalized_category}_{normalized_value}"
        if key in seen:
            raise DuplicateKeyError(key)
        seen.add(key)
        label = label_fn(normalized_value)
        if not isinstance(label, str):
            raise InvalidInputError(
                f"Entry '{name}': label must be a string, "
                f"got {type(label).__name__}"
            )
        entries.append(Entry(
            name=name,
            key=key,
            category=normalized_category,
            value=normalized_value,
            label=label,
        ))

    logger.debug("Built registry %s with %d entries",
                 normalized_category, len(entries))
    return Registry(
        category=normalized_category,
        keys=MappingProxyType({e.name: e.key for e in entries}),
        label_map=MappingProxyType({e.key: e.label for e in entries}),
        entries=tuple(entries),
        map=MappingProxyType({e.key: e for e in entries}),
    )


def build_registry(category: str, definitions, *,
                   format_label: Optional[LabelFormatter] = None) -> Registry:
    """Build the Registry for *category* from declarative definitions.

    An Enum subclass is routed to build_enum_registry. Any mapping is
    treated as name → definition.

    Raises InvalidInputError for empty tokens or malformed definitions,
    DuplicateKeyError when two entries normalize to the same key.
    """
    if is_enumeration_class(definitions):
        return build_enum_registry(category, definitions, format_label=format_label)
    if not isinstance(definitions, Mapping):
        raise InvalidInputError(
            f"definitions for '{category}' must be a mapping or an Enum "
            f"subclass, got {type(definitions).__name__}"
        )

    formatter = format_label or default_format_label

    def rows():
        for name, definition in definitions.items():
            _check_name(name)
            definition = _coerce_definition(name, definition)
            if isinstance(definition, str):
                yield name, name, (lambda _v, label=definition: label)
                continue
            raw_value = definition.value if definition.value is not None else name
            if definition.label is not None:
                yield name, raw_value, (lambda _v, label=definition.label: label)
            else:
                yield name, raw_value, (lambda v, n=name: formatter(v, n))

    return _assemble(category, rows())


def build_enum_registry(category: str, enumeration, *,
                        format_label: Optional[LabelFormatter] = None) -> Registry:
    """Build the Registry for *category* from an ordinal enumeration.

    Keys come from member names. Labels are the stringified member values
    unless *format_label* is given, in which case it always wins.
    """
    definitions = adapt_enumeration(enumeration)

    def rows():
        for name, value_text in definitions.items():
            if format_label is not None:
                yield name, name, (lambda v, n=name: format_label(v, n))
            else:
                yield name, name, (lambda _v, label=value_text: label)

    return _assemble(category, rows())
