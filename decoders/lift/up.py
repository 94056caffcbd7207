"""
Подъем значений в Result.

Функции для преобразования обычных значений, Optional, Option и
exception-based кода в Result / LazyCoroResult.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Never

from kungfu import Error, LazyCoroResult, Ok, Option, Result, Some


def pure[T](value: T) -> Result[T, Never]:
    """
    Lift pure value into an always-succeeding Result.

    Example:
        from decoders import lift as L

        L.pure(42)  # Ok(42)
    """
    return Ok(value)


def fail[E](error: E) -> Result[Never, E]:
    """Always-failing Result. Dual of pure()."""
    return Error(error)


def from_optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> Result[T, E]:
    """
    Convert Optional to Result. None becomes Error(error()).

    **When to use:** a lookup returned `None` and the pipeline needs a typed
    failure instead.

    Example:
        from decoders import lift as L

        L.from_optional(headers.get("etag"), error=lambda: transport_error("no etag"))

    NOTE: error is a thunk to avoid building the error when value is present.
    """
    if value is None:
        return Error(error())
    return Ok(value)


def from_option[T, E](
    value: Option[T],
    *,
    error: Callable[[], E],
) -> Result[T, E]:
    """Convert kungfu Option to Result. Nothing becomes Error(error())."""
    match value:
        case Some(v):
            return Ok(v)
        case _:
            return Error(error())


type _Catch = type[Exception] | tuple[type[Exception], ...]


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
    catch: _Catch = Exception,
) -> Result[T, E]:
    """
    Run a sync thunk; exceptions matching `catch` become Error(on_error(exc)).

    Anything not matching `catch` propagates untouched.

    Example:
        L.catching(lambda: json.loads(raw), on_error=lambda e: parse_error(str(e)), catch=ValueError)
    """
    try:
        return Ok(thunk())
    except catch as exc:
        return Error(on_error(exc))


def catching_async[T, E](
    thunk: Callable[[], Awaitable[T]],
    *,
    on_error: Callable[[Exception], E],
    catch: _Catch = Exception,
) -> LazyCoroResult[T, E]:
    """
    Lazy async version of catching().

    NOTE: thunk must be a zero-arg callable; a bare coroutine would already
          be running. Nothing starts until the LazyCoroResult is awaited.
    """

    async def run() -> Result[T, E]:
        try:
            return Ok(await thunk())
        except catch as exc:
            return Error(on_error(exc))

    return LazyCoroResult(run)


__all__ = (
    "pure",
    "fail",
    "from_optional",
    "from_option",
    "catching",
    "catching_async",
)
