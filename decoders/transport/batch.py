"""
Batch fetch
===========

Fan-out / join: dispatch every request with bounded concurrency, wait for
all of them, report each outcome under its request identity.

Failures are per item; one failed request never aborts the batch.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping, Sequence

from kungfu import LazyCoroResult, Ok, Result

from .._errors import ErrorInfo
from .._types import LCR, Decoder, NoError
from ..config import BatchPolicy
from ..pipeline import Response, parse_result
from .http import Request, Transport

type BatchResults = dict[str, Result[Response, ErrorInfo]]


def fetch_all(
    transport: Transport,
    requests: Sequence[Request],
    *,
    policy: BatchPolicy = BatchPolicy(),
    on_complete: Callable[[BatchResults], None] | None = None,
) -> LCR[BatchResults, NoError]:
    """
    Fetch all requests concurrently; never fails as a whole.

    Requests sharing an identity are fetched once. Entries keep the order of
    first appearance in `requests`. `on_complete` fires exactly once, after
    the last individual completion.
    """

    async def run() -> Result[BatchResults, NoError]:
        unique = list({request.identity: request for request in requests}.values())
        semaphore = asyncio.Semaphore(policy.concurrency)
        raws: list[Result[Response, ErrorInfo] | None] = [None] * len(unique)

        async def process(idx: int, request: Request) -> None:
            async with semaphore:
                raws[idx] = await transport.fetch(request)

        await asyncio.gather(*(process(i, request) for i, request in enumerate(unique)))

        results: BatchResults = {}
        for request, raw in zip(unique, raws, strict=True):
            if raw is None:
                raise RuntimeError("fetch_all(): internal error (missing result)")
            results[request.identity] = raw

        if on_complete is not None:
            on_complete(results)
        return Ok(results)

    return LazyCoroResult(run)


def decode_all[T](
    results: Mapping[str, Result[Response, ErrorInfo]],
    target: type[T] | Decoder[T],
    /,
) -> dict[str, Result[T, ErrorInfo]]:
    """Run the decode pipeline on every batch entry independently."""
    return {identity: parse_result(raw, target) for identity, raw in results.items()}


__all__ = ("BatchResults", "decode_all", "fetch_all")
