"""Traverse combinators

All-or-nothing collection over Option."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from kungfu import Nothing, Option, Some


def sequence[T](options: Iterable[Option[T]], /) -> Option[list[T]]:
    """Some(list) if every element is Some, otherwise Nothing."""
    values: list[T] = []
    for option in options:
        match option:
            case Some(v):
                values.append(v)
            case _:
                return Nothing()
    return Some(values)


def traverse[A, T](items: Iterable[A], f: Callable[[A], Option[T]], /) -> Option[list[T]]:
    """Map `f` over items, stop at the first Nothing."""
    return sequence(f(item) for item in items)


__all__ = ("sequence", "traverse")
