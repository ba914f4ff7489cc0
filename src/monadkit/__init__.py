"""monadkit: Functor/Monad abstractions and a minimal Result type.

Compose fallible steps over pure domain logic:

    >>> from monadkit import Success, Failure, bind, map
    >>> map(Success(10), lambda x: x + 10)
    Success(20)
    >>> bind(Failure("it broke"), lambda a: Success(a + " world"))
    Failure('it broke')
"""

from .foundation.config import MonadkitSettings, clear_settings_cache, get_settings
from .foundation.errors import MonadkitError, UnwrapError
from .monads import (
    Failure,
    Functor,
    Monad,
    Result,
    Success,
    attempt,
    bind,
    chain,
    check_functor_laws,
    check_monad_laws,
    describe_exception,
    fold,
    guarded,
    map,
    sequence,
    traverse,
)
from .runtime.observability.logging import configure_from_settings, configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    "Result", "Success", "Failure",
    "map", "bind",
    "chain", "fold", "sequence", "traverse",
    "Functor", "Monad", "check_functor_laws", "check_monad_laws",
    "attempt", "guarded", "describe_exception",
    "MonadkitError", "UnwrapError",
    "MonadkitSettings", "get_settings", "clear_settings_cache",
    "configure_logging", "configure_from_settings", "get_logger",
    "__version__",
]
