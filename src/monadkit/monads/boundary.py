"""Explicit fault boundary: exceptions in, Failure values out.

``map`` and ``bind`` never catch. When a callback is partial (parsing,
division, dictionary lookups) wrap it here so its exceptions become
``Failure`` messages instead of escaping:

    >>> from monadkit import Success, bind
    >>> from monadkit.monads.boundary import guarded
    >>> parse = guarded(int)
    >>> bind(Success("42"), parse)
    Success(42)
    >>> bind(Success("forty-two"), parse)
    Failure("ValueError: invalid literal for int() with base 10: 'forty-two'")

Only ``Exception`` subclasses are converted; KeyboardInterrupt, SystemExit
and friends propagate.
"""

from __future__ import annotations

from functools import wraps
from typing import Callable, ParamSpec, TypeVar

from monadkit.foundation.config import get_settings
from monadkit.runtime.observability.logging import get_logger

from .result import Failure, Result, Success

P = ParamSpec("P")
T = TypeVar("T")

_log = get_logger("monadkit.boundary")


def describe_exception(exc: Exception, *, include_type: bool | None = None) -> str:
    """Render an exception as a failure message.

    ``"ValueError: bad"`` with the type prefix, ``"bad"`` without. An exception
    with an empty message falls back to its type name either way.
    """
    if include_type is None:
        include_type = get_settings().boundary.include_exception_type
    name, text = type(exc).__name__, str(exc)
    if not text:
        return name
    return f"{name}: {text}" if include_type else text


def attempt(f: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Result[T]:
    """Call ``f`` and wrap the outcome: return value in Success, exception in Failure."""
    settings = get_settings().boundary
    try:
        return Success(f(*args, **kwargs))
    except Exception as e:
        message = describe_exception(e, include_type=settings.include_exception_type)
        if settings.log_faults:
            _log.warning("fault converted to failure", function=getattr(f, "__qualname__", repr(f)),
                         error_type=type(e).__name__, message=message)
        return Failure(message)


def guarded(f: Callable[P, T]) -> Callable[P, Result[T]]:
    """Decorator turning a partial ``T -> U`` into a total ``T -> Result[U]``.

    The decorated function is a ready-made ``bind`` step.

    Example:
        >>> @guarded
        ... def reciprocal(x: float) -> float:
        ...     return 1 / x
        >>> reciprocal(0)
        Failure('ZeroDivisionError: division by zero')
    """
    @wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T]:
        return attempt(f, *args, **kwargs)

    return wrapper
