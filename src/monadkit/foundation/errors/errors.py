"""Library exceptions.

Domain failures are values (``Failure``), never exceptions. The classes here
cover misuse of the library itself: extracting a value that is not there,
or feeding a non-Result into the free functions (plain ``TypeError``).
"""

from __future__ import annotations


class MonadkitError(Exception):
    """Base class for all monadkit exceptions."""


class UnwrapError(MonadkitError):
    """Raised when ``unwrap()`` is called on a ``Failure``.

    Attributes:
        message: The failure message that was found instead of a value
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Called unwrap() on Failure: {message!r}")
