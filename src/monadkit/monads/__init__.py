"""Functor/Monad abstractions and the Result monad.

Example:
    >>> from monadkit.monads import Failure, Result, Success, chain
    >>>
    >>> def withdraw(balance: int) -> Result[int]:
    ...     return Success(balance - 10) if balance >= 10 else Failure("insufficient funds")
    >>>
    >>> chain(Success(25), withdraw, withdraw)
    Success(5)
    >>> chain(Success(15), withdraw, withdraw, withdraw)
    Failure('insufficient funds')
"""

from .boundary import attempt, describe_exception, guarded
from .laws import check_functor_laws, check_monad_laws
from .protocols import Functor, Monad
from .result import (
    Failure,
    Result,
    Success,
    bind,
    chain,
    fold,
    map,
    sequence,
    traverse,
)

__all__ = [
    # Core types
    "Result",
    "Success",
    "Failure",
    # Core operations
    "map",
    "bind",
    # Composition
    "chain",
    "fold",
    "sequence",
    "traverse",
    # Capabilities
    "Functor",
    "Monad",
    "check_functor_laws",
    "check_monad_laws",
    # Fault boundary
    "attempt",
    "guarded",
    "describe_exception",
]
