"""
Log - стадийный журнал для Writer
=================================

Immutable sequence of trace entries. Stages of the decode pipeline append
to it instead of printing, so a caller sees exactly which stages ran.
"""

from __future__ import annotations


class Log[A](tuple[A, ...]):
    """
    Monoid over tuple: `Log()` is empty, `combine` concatenates.

    Equality is plain tuple equality, so `Log.of("a") == ("a",)`.
    """

    __slots__ = ()

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        return Log(items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Example:
            Log.of("status: ok").combine(Log.of("json: ok"))  # Log('status: ok', 'json: ok')
        """
        return Log((*self, *other))

    def tell(self, item: A, /) -> Log[A]:
        return Log((*self, item))

    def render(self, sep: str = "\n") -> str:
        """One entry per line, ready to print."""
        return sep.join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"Log({', '.join(repr(item) for item in self)})"


__all__ = ("Log",)
