"""Tests for the generic law checkers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import pytest

from monadkit import Failure, Result, Success, check_functor_laws, check_monad_laws


@dataclass(frozen=True)
class Counted:
    """Deliberately unlawful container: every map/bind bumps a counter."""

    value: Any
    ops: int = 0

    def map(self, f: Callable[[Any], Any]) -> Counted:
        return Counted(f(self.value), self.ops + 1)

    def bind(self, f: Callable[[Any], Counted]) -> Counted:
        inner = f(self.value)
        return Counted(inner.value, inner.ops + self.ops + 1)


@pytest.mark.parametrize("fa", [Success(4), Failure("fail")])
def test_result_is_lawful_functor(fa: Result[int]) -> None:
    report = check_functor_laws(fa, lambda x: x + 1, lambda x: x * 3)
    assert report == Success(("identity", "composition"))


@pytest.mark.parametrize("m", [Success(4), Failure("fail")])
def test_result_is_lawful_monad(m: Result[int]) -> None:
    f = lambda x: Success(x + 1) if x < 10 else Failure("too big")  # noqa: E731
    g = lambda x: Success(str(x))  # noqa: E731

    report = check_monad_laws(Success, 9, m, f, g)
    assert report == Success(("left_identity", "right_identity", "associativity"))


def test_unlawful_functor_reports_identity() -> None:
    report = check_functor_laws(Counted(1), lambda x: x, lambda x: x)

    assert report.is_failure()
    assert report.message.startswith("identity violated:")
    assert "Counted(value=1, ops=1)" in report.message


def test_unlawful_monad_reports_first_broken_law() -> None:
    report = check_monad_laws(Counted, 1, Counted(1), lambda x: Counted(x), lambda x: Counted(x))

    assert report.is_failure()
    assert report.message.startswith("left_identity violated:")


def test_custom_equality() -> None:
    same_value = lambda a, b: a.value == b.value  # noqa: E731
    report = check_functor_laws(Counted(1), lambda x: x + 1, lambda x: x * 2, eq=same_value)

    assert report == Success(("identity", "composition"))
