"""
Decode pipeline
===============

bytes -> status check -> JSON tree -> target type.

Each stage returns Result[..., ErrorInfo]; the first Error short-circuits
the rest of the chain and carries the ErrorKind of the stage that failed.
"""

from __future__ import annotations

import json
from collections.abc import Callable

from kungfu import Error, Ok, Result

from .. import lift as L
from .._errors import ErrorInfo, decode_error, parse_error
from .._types import JSON, Decoder
from ..chain import chain
from ..schema import decoder_for
from ..writer import Log, WriterResult
from .response import Response, parse_response


def decode_json(data: bytes, /) -> Result[JSON, ErrorInfo]:
    """Parse raw bytes into an untyped JSON tree. Bad UTF-8 and runaway nesting are parse errors too."""
    return L.catching(
        lambda: json.loads(data),
        on_error=lambda exc: parse_error(str(exc)),
        catch=(ValueError, RecursionError),
    )


def _target_name(target: type | Decoder[object]) -> str:
    return getattr(target, "__name__", type(target).__name__)


def decode_object[T](json_value: JSON, target: type[T] | Decoder[T], /) -> Result[T, ErrorInfo]:
    """Run the target's decode capability; Nothing becomes a decode error."""
    return L.from_option(
        decoder_for(target)(json_value),
        error=lambda: decode_error(_target_name(target)),
    )


def _decoding[T](target: type[T] | Decoder[T]) -> Callable[[JSON], Result[T, ErrorInfo]]:
    return lambda json_value: decode_object(json_value, target)


def decode[T](data: bytes, status: int, target: type[T] | Decoder[T], /) -> Result[T, ErrorInfo]:
    """
    Full pipeline for one response.

    Example:
        match decode(b'{"id": 1, "name": "Alice"}', 200, User):
            case Ok(user): ...
            case Error(info) if info.kind is ErrorKind.DECODE: ...
    """
    return parse_result(Ok(Response(data, status)), target)


def parse_result[T](
    response: Result[Response, ErrorInfo],
    target: type[T] | Decoder[T],
    /,
) -> Result[T, ErrorInfo]:
    """Same pipeline starting from a transport outcome."""
    return chain(response, parse_response, decode_json, _decoding(target))


# ============================================================================
# Writer variant
# ============================================================================


def _stage[A, B](
    name: str,
    step: Callable[[A], Result[B, ErrorInfo]],
) -> Callable[[A], WriterResult[B, ErrorInfo, Log[str]]]:
    def run(value: A) -> WriterResult[B, ErrorInfo, Log[str]]:
        result = step(value)
        match result:
            case Ok(_):
                return WriterResult(result, Log.of(f"{name}: ok"))
            case Error(info):
                return WriterResult(result, Log.of(f"{name}: {info}"))

    return run


def decode_w[T](
    data: bytes,
    status: int,
    target: type[T] | Decoder[T],
    /,
) -> WriterResult[T, ErrorInfo, Log[str]]:
    """decode() that also returns one log line per stage that actually ran."""
    start: WriterResult[Response, ErrorInfo, Log[str]] = WriterResult(
        Ok(Response(data, status)),
        Log.of(f"response: {len(data)} bytes, status {status}"),
    )
    return (
        start
        .then(_stage("status", parse_response))
        .then(_stage("json", decode_json))
        .then(_stage(f"decode {_target_name(target)}", _decoding(target)))
    )


__all__ = (
    "decode",
    "decode_json",
    "decode_object",
    "decode_w",
    "parse_result",
)
