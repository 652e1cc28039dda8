"""
Exceptions raised while building, merging, and querying keyword registries.

All of them derive from RegistryError so callers can catch the whole family
at application startup.
"""


class RegistryError(Exception):
    """Base class for every keyword registry failure."""


class InvalidInputError(RegistryError, ValueError):
    """Raised when a category, value, or definition cannot be normalized."""

    def __init__(self, message, role=None):
        self.role = role
        super().__init__(message)


class DuplicateKeyError(RegistryError):
    """Raised when two entries produce the same composite key.

    Raised by a single registry build and by merges across registries.
    """

    def __init__(self, key, message=None):
        self.key = key
        super().__init__(message or f"Duplicated keyword key detected: {key}")


class KeyNotFoundError(RegistryError, LookupError):
    """Raised by strict label resolution when a key is absent."""

    def __init__(self, key, message=None):
        self.key = key
        super().__init__(message or f'Keyword label not found for key: "{key}"')

    def __str__(self):
        # LookupError would otherwise repr() a single argument
        return self.args[0]
