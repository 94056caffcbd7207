"""
Bind combinators
================

Monadic bind (`>>>`) over kungfu Result and Option.

Some / Nothing are subclasses of Ok / Error in kungfu, so one bind serves
both: "nothing" plays the role of a failure.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from functools import reduce

from kungfu import Error, Ok, Result


def bind[T, U, E](m: Result[T, E], f: Callable[[T], Result[U, E]], /) -> Result[U, E]:
    """
    Run `f` on the success value; pass failures through untouched.

    Example:
        bind(Ok(2), lambda x: Ok(x * 10))      # Ok(20)
        bind(Error(e), lambda x: Ok(x * 10))   # Error(e), f never called
        bind(Nothing(), parse)                 # Nothing()
    """
    match m:
        case Ok(value):
            return f(value)
        case Error(_):
            return m


def chain[E](
    m: Result[typing.Any, E],
    /,
    *steps: Callable[[typing.Any], Result[typing.Any, E]],
) -> Result[typing.Any, E]:
    """
    Left-associative bind over several steps: `m >>> f >>> g`.

    Stops at the first failure; later steps never run.
    """
    return reduce(bind, steps, m)


__all__ = ("bind", "chain")
