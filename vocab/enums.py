"""
Ordinal enumeration adapter.

Turns an enumeration into the name → definition mapping consumed by the
registry builder. Two enumeration shapes are accepted:

    class OrderStatus(str, Enum):        {"ACTIVE": 0, "INACTIVE": 1,
        PENDING = "PENDING"               "0": "ACTIVE", "1": "INACTIVE"}
        FILLED = "FILLED"

The mapping form may carry reverse value → name entries (as numeric
enumerations exported from other systems often do); those are skipped.
"""

import re
from collections.abc import Mapping
from enum import Enum

from vocab.errors import InvalidInputError

# names an ordinal numeric parse accepts: decimals, exponents, Infinity,
# and unsigned 0x / 0o / 0b literals
_NUMERIC_NAME = re.compile(
    r"^(?:[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
    r"|0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+)$"
)


def is_enumeration_class(obj) -> bool:
    """True if *obj* is an Enum subclass (not a member)."""
    return isinstance(obj, type) and issubclass(obj, Enum)


def _is_numeric_name(name: str) -> bool:
    stripped = name.strip()
    return not stripped or bool(_NUMERIC_NAME.match(stripped))


def _is_primitive(value) -> bool:
    # bool is an int subclass but is not an ordinal constant
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float))


def _members(enumeration):
    """Yield (name, underlying value) pairs in definition order."""
    if is_enumeration_class(enumeration):
        # __members__ keeps aliases, so every declared name becomes an entry
        for name, member in enumeration.__members__.items():
            yield name, member.value
        return

    if isinstance(enumeration, Mapping):
        for name, value in enumeration.items():
            if isinstance(value, Enum):
                value = value.value
            yield name, value
        return

    raise InvalidInputError(
        f"enumeration must be an Enum subclass or a mapping, "
        f"got {type(enumeration).__name__}"
    )


def adapt_enumeration(enumeration) -> dict:
    """Convert an enumeration into {member_name: str(underlying_value)}.

    Numeric member names (reverse mappings) and non-primitive values are
    skipped. An empty enumeration yields an empty dict.
    """
    result = {}
    for name, value in _members(enumeration):
        if not isinstance(name, str) or _is_numeric_name(name):
            continue
        if not _is_primitive(value):
            continue
        result[name] = str(value)
    return result
