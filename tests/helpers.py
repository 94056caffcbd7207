"""Domain types and test doubles shared across the suite.

`User` is the domain type from the decoding scenarios; `FakeTransport`
stands in for the network so async flows run without sockets.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field

import httpx
from kungfu import Error, LazyCoroResult, Ok, Option, Result

from decoders import (
    JSON,
    ErrorInfo,
    HttpTransport,
    Request,
    Response,
    as_object,
    bind,
    build,
    nullable,
    required,
)

# =============================================================================
# Domain types
# =============================================================================


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    email: str | None = None

    @classmethod
    def decode(cls, json: JSON) -> Option[User]:
        return bind(
            as_object(json),
            lambda d: build(
                cls,
                required(d, "id", int),
                required(d, "name", str),
                nullable(d, "email", str),
            ),
        )


@dataclass(frozen=True, slots=True)
class Team:
    name: str
    owner: User

    @classmethod
    def decode(cls, json: JSON) -> Option[Team]:
        return bind(
            as_object(json),
            lambda d: build(cls, required(d, "name", str), required(d, "owner", User)),
        )


# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class FakeTransport:
    """Transport double keyed by request identity.

    Unknown identities answer 404. Tracks how many fetches ran and the
    highest number in flight at once.
    """

    responses: dict[str, Response | ErrorInfo] = field(default_factory=dict)
    delay_seconds: float = 0.0
    calls: list[str] = field(default_factory=list)
    in_flight: int = 0
    max_in_flight: int = 0

    def fetch(self, request: Request, /) -> LazyCoroResult[Response, ErrorInfo]:
        async def run() -> Result[Response, ErrorInfo]:
            self.calls.append(request.identity)
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
            try:
                await asyncio.sleep(self.delay_seconds)
            finally:
                self.in_flight -= 1
            outcome = self.responses.get(request.identity, Response(b"", 404))
            if isinstance(outcome, ErrorInfo):
                return Error(outcome)
            return Ok(outcome)

        return LazyCoroResult(run)


def mock_transport(handler: Callable[[httpx.Request], httpx.Response]) -> HttpTransport:
    """HttpTransport over httpx.MockTransport."""
    return HttpTransport(httpx.AsyncClient(transport=httpx.MockTransport(handler)))
