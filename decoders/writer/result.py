"""
WriterResult - Result со стадийным логом
========================================
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from .log import Log


class WriterResult[T, E, W]:
    """
    Result plus the log accumulated while producing it.

    This is the "unwrapped" form of LazyCoroResultWriter and also what the
    synchronous `decode_w` pipeline returns directly.
    """

    __slots__ = ("_result", "_log")
    __match_args__ = ("_result", "_log")

    def __init__(self, result: Result[T, E], log: W) -> None:
        self._result = result
        self._log = log

    @property
    def result(self) -> Result[T, E]:
        return self._result

    @property
    def log(self) -> W:
        return self._log

    def then[U, A](
        self: WriterResult[T, E, Log[A]],
        f: Callable[[T], WriterResult[U, E, Log[A]]],
        /,
    ) -> WriterResult[U, E, Log[A]]:
        """
        Synchronous bind.

        On Ok runs `f` and appends its log; on Error keeps the log so far and
        never calls `f`.
        """
        match self._result:
            case Ok(value):
                nxt = f(value)
                return WriterResult(nxt.result, self._log.combine(nxt.log))
            case Error(err):
                return WriterResult(Error(err), self._log)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WriterResult):
            return NotImplemented
        return self._result == other._result and self._log == other._log

    def __repr__(self) -> str:
        return f"WriterResult({self._result!r}, log={self._log!r})"


__all__ = ("WriterResult",)
