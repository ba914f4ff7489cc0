"""Law checkers for Functor and Monad instances.

Each checker evaluates the laws for concrete sample inputs and reports the
outcome as a Result: ``Success`` with the names of the laws that held, or
``Failure`` naming the first law that broke and both sides of the equation.
Instances are compared with ``==`` unless ``eq`` is supplied.

Example:
    >>> from monadkit import Success
    >>> check_monad_laws(Success, 3, Success(3), lambda x: Success(x + 1), lambda x: Success(x * 2))
    Success(('left_identity', 'right_identity', 'associativity'))
"""

from __future__ import annotations

import operator
from typing import Any, Callable, TypeVar

from .protocols import Functor, Monad
from .result import Failure, Result, Success, chain

T = TypeVar("T")
U = TypeVar("U")
W = TypeVar("W")

Eq = Callable[[Any, Any], bool]


def _law(name: str, left: object, right: object, eq: Eq) -> Callable[[tuple[str, ...]], Result[tuple[str, ...]]]:
    def step(passed: tuple[str, ...]) -> Result[tuple[str, ...]]:
        if eq(left, right):
            return Success((*passed, name))
        return Failure(f"{name} violated: left={left!r}, right={right!r}")
    return step


def check_functor_laws(
    fa: Functor[T],
    f: Callable[[T], U],
    g: Callable[[U], W],
    *,
    eq: Eq = operator.eq,
) -> Result[tuple[str, ...]]:
    """Check identity and composition for ``fa``.

    identity:    fa.map(id) == fa
    composition: fa.map(f).map(g) == fa.map(g . f)
    """
    return chain(
        Success(()),
        _law("identity", fa.map(lambda x: x), fa, eq),
        _law("composition", fa.map(f).map(g), fa.map(lambda x: g(f(x))), eq),
    )


def check_monad_laws(
    unit: Callable[[T], Monad[T]],
    value: T,
    m: Monad[T],
    f: Callable[[T], Monad[U]],
    g: Callable[[U], Monad[W]],
    *,
    eq: Eq = operator.eq,
) -> Result[tuple[str, ...]]:
    """Check left identity, right identity and associativity.

    Args:
        unit: The instance's constructor (``Success`` for Result)
        value: Plain value for left identity
        m: Wrapped value for right identity and associativity
        f: First effectful step
        g: Second effectful step
    """
    return chain(
        Success(()),
        _law("left_identity", unit(value).bind(f), f(value), eq),
        _law("right_identity", m.bind(unit), m, eq),
        _law("associativity", m.bind(f).bind(g), m.bind(lambda x: f(x).bind(g)), eq),
    )
