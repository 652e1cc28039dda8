"""
Token normalization: canonical UPPER_SNAKE tokens for keys.

camelCase, kebab-case, space separated, and existing SNAKE_CASE spellings of
the same word all converge:

    normalize_category("userRole")      → "USER_ROLE"
    normalize_category("user-role")     → "USER_ROLE"
    normalize_keyword_value(" Admin ")  → "ADMIN"
"""

import re

from vocab.errors import InvalidInputError

_CAMEL_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
# digits never run straight into letters, so output is a fixed point
_DIGIT_LETTER_BOUNDARY = re.compile(r"([0-9])([A-Za-z])")
_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]+")
_REPEATED_UNDERSCORE = re.compile(r"__+")

# role → wording used in error messages
_ROLE_NAMES = {
    "category": "category",
    "value": "keyword value",
}


def normalize_token(token: str, role: str = "value") -> str:
    """Normalize *token* into a non-empty upper-snake token.

    *role* is "category" or "value" and only affects the error message.
    Raises InvalidInputError if the token is not a string, is blank, or has
    no letters or digits at all.
    """
    role_name = _ROLE_NAMES.get(role, role)
    if not isinstance(token, str):
        raise InvalidInputError(
            f"{role_name} must be a non-empty string, got {type(token).__name__}",
            role=role,
        )

    trimmed = token.strip()
    if not trimmed:
        raise InvalidInputError(f"{role_name} must be a non-empty string", role=role)

    result = _CAMEL_CASE_BOUNDARY.sub(r"\1_\2", trimmed)
    result = _DIGIT_LETTER_BOUNDARY.sub(r"\1_\2", result)
    result = _NON_ALPHANUMERIC.sub("_", result)
    result = _REPEATED_UNDERSCORE.sub("_", result)
    result = result.strip("_").upper()

    if not result:
        raise InvalidInputError(
            f"{role_name} must be a non-empty string "
            f"(no letters or digits in {token!r})",
            role=role,
        )
    return result


def normalize_category(category: str) -> str:
    return normalize_token(category, "category")


def normalize_keyword_value(value: str) -> str:
    return normalize_token(value, "value")
