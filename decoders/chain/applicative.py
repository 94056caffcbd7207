"""
Applicative combinators
=======================

Functor map (`<^>`) and applicative apply (`<*>`) over kungfu Option.

Построение объекта из N полей:

    build(User, required(d, "id", int), required(d, "name", str), nullable(d, "email", str))

is `User.create <^> id <*> name <*> email`: every field is extracted
independently and a single missing one turns the whole thing into Nothing.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from functools import reduce

from kungfu import Nothing, Option, Some


def pure[T](value: T, /) -> Option[T]:
    """Lift a value into Option."""
    return Some(value)


def fmap[A, B](f: Callable[[A], B], value: Option[A], /) -> Option[B]:
    """Apply a plain function to a present value; Nothing stays Nothing."""
    match value:
        case Some(v):
            return Some(f(v))
        case _:
            return Nothing()


def apply[A, B](f: Option[Callable[[A], B]], value: Option[A], /) -> Option[B]:
    """Apply an optional function to an optional value. Nothing if either is absent."""
    match (f, value):
        case (Some(fn), Some(v)):
            return Some(fn(v))
        case _:
            return Nothing()


def curry(fn: Callable[..., typing.Any], arity: int, /) -> Callable[[typing.Any], typing.Any]:
    """
    Turn an n-ary callable into nested unary functions.

    Example:
        curry(User, 3)(1)("Alice")(None)  # User(1, "Alice", None)
    """
    if arity < 1:
        raise ValueError("curry() arity must be >= 1")

    def collect(args: tuple[typing.Any, ...]) -> typing.Any:
        if len(args) == arity:
            return fn(*args)
        return lambda arg: collect((*args, arg))

    return collect(())


def build[T](constructor: Callable[..., T], /, *fields: Option[typing.Any]) -> Option[T]:
    """
    Construct `constructor(*values)` if every field is present.

    Never calls the constructor with a partial set of arguments.
    """
    if not fields:
        return Some(constructor())
    return reduce(apply, fields, pure(curry(constructor, len(fields))))


__all__ = ("pure", "fmap", "apply", "curry", "build")
