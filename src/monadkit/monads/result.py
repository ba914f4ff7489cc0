"""Result monad for composing fallible computations.

A ``Result[T]`` is exactly one of two variants:
- ``Success(value)``: the computation produced a ``T``
- ``Failure(message)``: it did not; only a human-readable message survives

Operations:
- Functor: map
- Monad: bind (alias and_then)
- Railway composition: chain, fold, sequence, traverse

Callbacks given to ``map``/``bind`` are assumed total. Anything they raise
propagates to the caller untouched; use ``monadkit.monads.boundary`` to turn
exceptions into ``Failure`` values explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Generic, NoReturn, TypeAlias, TypeVar, Union

from monadkit.foundation.errors import UnwrapError
from monadkit.runtime.observability.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")  # Success type
U = TypeVar("U")  # Mapped success type
V = TypeVar("V")  # Folded output type

_log = get_logger("monadkit.result")


# ═════════════════════════════════════════════════════════════════════════════
# Variants
# ═════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful computation holding a domain value.

    Examples:
        >>> Success(5).map(lambda x: x * 2)
        Success(10)
        >>> Success("hello").bind(lambda s: Success(s + " world"))
        Success('hello world')
    """

    value: T

    def map(self, f: Callable[[T], U]) -> Success[U]:
        """Apply ``f`` to the wrapped value (Functor).

        Type signature: Result[T] -> (T -> U) -> Result[U]
        """
        return Success(f(self.value))

    def bind(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Monadic bind (>>=): hand the value to the next fallible step.

        Type signature: Result[T] -> (T -> Result[U]) -> Result[U]
        """
        return f(self.value)

    def and_then(self, f: Callable[[T], Result[U]]) -> Result[U]:
        """Alias for bind for better readability."""
        return f(self.value)

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Extract the value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Generic[T]):
    """Failed computation holding only a diagnostic message.

    ``T`` is the success type the computation would have produced. It is
    never stored, so ``Failure[int]("x") == Failure[str]("x")``.

    Examples:
        >>> Failure("it broke").map(lambda x: x * 2)
        Failure('it broke')
        >>> Failure("it broke").bind(lambda s: Success(s + " world"))
        Failure('it broke')
    """

    message: str

    def map(self, f: Callable[[T], U]) -> Failure[U]:  # noqa: ARG002
        """No-op on Failure: re-types the failure, ``f`` is never invoked."""
        return Failure(self.message)

    def bind(self, f: Callable[[T], Result[U]]) -> Failure[U]:  # noqa: ARG002
        """No-op on Failure: short-circuits, ``f`` is never invoked."""
        return Failure(self.message)

    def and_then(self, f: Callable[[T], Result[U]]) -> Failure[U]:  # noqa: ARG002
        """Alias for bind."""
        return Failure(self.message)

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise, since there is no value.

        Raises:
            UnwrapError: Always, carrying the failure message
        """
        raise UnwrapError(self.message)

    def unwrap_or(self, default: T) -> T:
        return default

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Failure({self.message!r})"


Result: TypeAlias = Union[Success[T], Failure[T]]


def _not_a_result(obj: object) -> NoReturn:
    raise TypeError(f"Expected Success or Failure, got {type(obj).__name__}")


# ═════════════════════════════════════════════════════════════════════════════
# Core Operations
# ═════════════════════════════════════════════════════════════════════════════


def map(result: Result[T], f: Callable[[T], U]) -> Result[U]:  # noqa: A001
    """Lift a pure ``T -> U`` into ``Result[T] -> Result[U]``.

    ``Success(v)`` becomes ``Success(f(v))``; ``Failure(m)`` becomes a new
    ``Failure(m)`` without calling ``f``. Exceptions raised by ``f`` are not
    caught.

    Raises:
        TypeError: If ``result`` is not a Success or Failure
    """
    match result:
        case Success(value):
            return Success(f(value))
        case Failure(message):
            return Failure(message)
        case _:
            _not_a_result(result)


def bind(result: Result[T], f: Callable[[T], Result[U]]) -> Result[U]:
    """Sequence a fallible ``T -> Result[U]`` over ``result``.

    ``Success(v)`` returns ``f(v)`` as is; ``Failure(m)`` returns
    ``Failure(m)`` without calling ``f``. Once a chain of binds hits a
    failure, that first message is threaded through to the end.

    Example:
        >>> bind(Success("hello"), lambda a: Success(a + " world"))
        Success('hello world')
        >>> bind(Failure("it broke"), lambda a: Success(a + " world"))
        Failure('it broke')

    Raises:
        TypeError: If ``result`` is not a Success or Failure
    """
    match result:
        case Success(value):
            return f(value)
        case Failure(message):
            return Failure(message)
        case _:
            _not_a_result(result)


# ═════════════════════════════════════════════════════════════════════════════
# Railway Composition
# ═════════════════════════════════════════════════════════════════════════════


def chain(result: Result[T], *steps: Callable[[object], Result[object]]) -> Result[object]:
    """Bind each step in order, stopping at the first Failure.

    Equivalent to ``bind(bind(bind(result, s1), s2), s3)`` but flat. Steps
    after the failing one are never invoked.

    Raises:
        TypeError: If ``result`` or any step's return value is not a Success or Failure

    Example:
        >>> chain(Success("hello"), lambda a: Success(a + "1"), lambda a: Success(a + "2"))
        Success('hello12')
    """
    current: Result[object] = result
    for index, step in enumerate(steps):
        match current:
            case Success(value):
                current = step(value)
            case Failure(message):
                if _log.is_enabled_for(logging.DEBUG):
                    _log.debug("chain short-circuited", skipped_from=index,
                               skipped=len(steps) - index, message=message)
                return current
            case _:
                _not_a_result(current)
    if not isinstance(current, (Success, Failure)):
        _not_a_result(current)
    return current


def fold(result: Result[T], *, on_success: Callable[[T], V], on_failure: Callable[[str], V]) -> V:
    """Exhaustive case analysis, collapsing a Result into a plain value.

    Example:
        >>> fold(Success(42), on_success=lambda x: f"got {x}", on_failure=lambda m: f"failed: {m}")
        'got 42'
    """
    match result:
        case Success(value):
            return on_success(value)
        case Failure(message):
            return on_failure(message)
        case _:
            _not_a_result(result)


def sequence(results: Iterable[Result[T]]) -> Result[list[T]]:
    """Convert Results into a Result of list, failing fast on the first Failure.

    Type signature: [Result[T]] -> Result[[T]]

    Example:
        >>> sequence([Success(1), Success(2)])
        Success([1, 2])
        >>> sequence([Success(1), Failure("fail"), Failure("later")])
        Failure('fail')
    """
    values: list[T] = []
    for result in results:
        match result:
            case Success(value):
                values.append(value)
            case Failure(message):
                return Failure(message)
            case _:
                _not_a_result(result)
    return Success(values)


def traverse(items: Iterable[T], f: Callable[[T], Result[U]]) -> Result[list[U]]:
    """Apply a fallible ``f`` to each item and collect, stopping at the first Failure.

    Items after the failing one are not visited.

    Type signature: [T] -> (T -> Result[U]) -> Result[[U]]
    """
    return sequence(f(item) for item in items)
