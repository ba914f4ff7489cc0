"""Generic effect capabilities.

``Functor`` and ``Monad`` are structural protocols: any container with the
right methods qualifies, no registration or inheritance required. ``Success``
and ``Failure`` satisfy both; a future Option- or Task-like type would too.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Functor(Protocol[T_co]):
    """Structure supporting ``map``.

    Laws:
        fa.map(lambda x: x) == fa
        fa.map(f).map(g) == fa.map(lambda x: g(f(x)))
    """

    def map(self, f: Callable[[T_co], Any]) -> Functor[Any]: ...


@runtime_checkable
class Monad(Functor[T_co], Protocol[T_co]):
    """Functor that can also sequence effectful steps with ``bind``.

    Laws (``unit`` being the instance's constructor, e.g. ``Success``):
        unit(a).bind(f) == f(a)
        m.bind(unit) == m
        m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))
    """

    def bind(self, f: Callable[[T_co], Any]) -> Monad[Any]: ...
