from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

from kungfu import Error, LazyCoroResult, Ok, Option, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from decoders import (  # noqa: E402
    JSON,
    ErrorInfo,
    Request,
    Response,
    as_object,
    bind,
    build,
    nullable,
    optional,
    required,
    transport_error,
)


@dataclass(frozen=True, slots=True)
class User:
    login: str
    id: int
    name: str | None
    location: Option[str]

    @classmethod
    def decode(cls, json: JSON) -> Option[User]:
        return bind(
            as_object(json),
            lambda d: build(
                cls,
                required(d, "login", str),
                required(d, "id", int),
                nullable(d, "name", str),
                optional(d, "location", str),
            ),
        )


def _empty_payloads() -> dict[str, Response | ErrorInfo]:
    return {}


@dataclass(slots=True)
class FakeApi:
    """Canned answers keyed by URL; anything else is 404."""

    payloads: dict[str, Response | ErrorInfo] = field(default_factory=_empty_payloads)
    delay_seconds: float = 0.0

    def fetch(self, request: Request, /) -> LazyCoroResult[Response, ErrorInfo]:
        async def run() -> Result[Response, ErrorInfo]:
            await asyncio.sleep(self.delay_seconds)
            print(f"  -> {request.method} {request.identity}")
            outcome = self.payloads.get(request.identity, Response(b"", 404))
            if isinstance(outcome, ErrorInfo):
                return Error(outcome)
            return Ok(outcome)

        return LazyCoroResult(run)


def offline() -> ErrorInfo:
    return transport_error("ConnectError: offline")


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
