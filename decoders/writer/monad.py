"""LazyCoroResultWriter

Async counterpart of WriterResult: a deferred coroutine producing
Result + Log. Nothing runs until it is awaited.

    (
        LazyCoroResultWriter.of(Ok(request), f"GET {request.identity}")
        .then(lambda r: LazyCoroResultWriter.from_lazy(transport.fetch(r), on_error=str))
        .then(lambda response: decode_w(response.data, response.status_code, User))
    )
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Awaitable, Callable, Coroutine

from kungfu import Error, LazyCoroResult, Ok, Result

from .log import Log
from .result import WriterResult

type _Thunk[T, E, W] = Callable[[], Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]]
type _Step[T, U, E, W] = Callable[[T], WriterResult[U, E, Log[W]] | Awaitable[WriterResult[U, E, Log[W]]]]


class LazyCoroResultWriter[T, E, W]:
    __slots__ = ("_thunk",)

    def __init__(self, thunk: _Thunk[T, E, W], /) -> None:
        self._thunk = thunk

    @classmethod
    def of[V, Err, Entry](cls, result: Result[V, Err], /, *entries: Entry) -> LazyCoroResultWriter[V, Err, Entry]:
        """Already known Result, optionally with opening log entries."""

        async def run() -> WriterResult[V, Err, Log[Entry]]:
            return WriterResult(result, Log.of(*entries))

        return LazyCoroResultWriter(run)

    @classmethod
    def from_lazy[V, Err, Entry](
        cls,
        lazy: LazyCoroResult[V, Err],
        /,
        *,
        on_error: Callable[[Err], Entry],
    ) -> LazyCoroResultWriter[V, Err, Entry]:
        """
        Lift a plain LazyCoroResult.

        Success adds nothing to the log; a failure is recorded as
        `on_error(error)`.
        """

        async def run() -> WriterResult[V, Err, Log[Entry]]:
            result = await lazy
            match result:
                case Ok(_):
                    return WriterResult(result, Log())
                case Error(err):
                    return WriterResult(result, Log.of(on_error(err)))

        return LazyCoroResultWriter(run)

    def map[U](self, f: Callable[[T], U], /) -> LazyCoroResultWriter[U, E, W]:
        async def run() -> WriterResult[U, E, Log[W]]:
            wr = await self
            return WriterResult(wr.result.map(f), wr.log)

        return LazyCoroResultWriter(run)

    def then[U](self, f: _Step[T, U, E, W], /) -> LazyCoroResultWriter[U, E, W]:
        """
        Bind. `f` may return a WriterResult directly or anything awaitable
        that yields one (a coroutine, another LazyCoroResultWriter).

        On Error `f` is skipped and the log so far is kept.
        """

        async def run() -> WriterResult[U, E, Log[W]]:
            wr = await self
            match wr.result:
                case Ok(value):
                    step = f(value)
                    nxt = await step if inspect.isawaitable(step) else step
                    return WriterResult(nxt.result, wr.log.combine(nxt.log))
                case Error(err):
                    return WriterResult(Error(err), wr.log)

        return LazyCoroResultWriter(run)

    def with_log(self, *entries: W) -> LazyCoroResultWriter[T, E, W]:
        """Append entries after the computation ran, whatever its outcome."""

        async def run() -> WriterResult[T, E, Log[W]]:
            wr = await self
            return WriterResult(wr.result, wr.log.combine(Log.of(*entries)))

        return LazyCoroResultWriter(run)

    def __await__(self) -> typing.Generator[typing.Any, None, WriterResult[T, E, Log[W]]]:
        return self._thunk().__await__()


__all__ = ("LazyCoroResultWriter",)
