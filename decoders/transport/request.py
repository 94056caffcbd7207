"""
Request helpers
===============

fetch + decode pipeline for a single request, as a lazy computation.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import LazyCoroResult, Ok, Result

from .._errors import ErrorInfo
from .._types import LCR, Decoder
from ..pipeline import decode_w, parse_result
from ..writer import LazyCoroResultWriter
from .http import Request, Transport


def perform_request[T](
    transport: Transport,
    request: Request,
    target: type[T] | Decoder[T],
    *,
    callback: Callable[[Result[T, ErrorInfo]], None] | None = None,
) -> LCR[T, ErrorInfo]:
    """
    Fetch `request` and decode the body into `target`.

    `callback`, if given, receives the final Result exactly once, after the
    pipeline finished, whatever the outcome.

    Example:
        result = await perform_request(transport, Request(url), User)
    """

    async def run() -> Result[T, ErrorInfo]:
        result = parse_result(await transport.fetch(request), target)
        if callback is not None:
            callback(result)
        return result

    return LazyCoroResult(run)


def perform_request_w[T](
    transport: Transport,
    request: Request,
    target: type[T] | Decoder[T],
) -> LazyCoroResultWriter[T, ErrorInfo, str]:
    """perform_request() with the stage trace in the log."""
    return (
        LazyCoroResultWriter.of(Ok(request), f"{request.method} {request.identity}")
        .then(
            lambda req: LazyCoroResultWriter.from_lazy(
                transport.fetch(req),
                on_error=lambda info: f"transport: {info}",
            )
        )
        .then(lambda response: decode_w(response.data, response.status_code, target))
    )


__all__ = ("perform_request", "perform_request_w")
