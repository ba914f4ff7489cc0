"""Error types for monadkit.

- MonadkitError/UnwrapError: exceptions for library misuse
- JsonValue/JsonDict: type aliases for structured log payloads
"""

from .errors import MonadkitError, UnwrapError
from .types import JsonDict, JsonPrimitive, JsonValue

__all__ = [
    "MonadkitError", "UnwrapError",
    "JsonDict", "JsonPrimitive", "JsonValue",
]
