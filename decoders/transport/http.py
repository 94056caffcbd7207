"""
HTTP transport
==============

Thin adapter over httpx.AsyncClient: one request in, one
Result[Response, ErrorInfo] out. Status codes are not judged here;
the decode pipeline does that.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass
from types import TracebackType

import httpx

from .. import lift as L
from .._errors import ErrorInfo, transport_error
from .._types import LCR
from ..config import ClientConfig
from ..pipeline import Response


@dataclass(frozen=True, slots=True)
class Request:
    url: str
    method: str = "GET"
    headers: tuple[tuple[str, str], ...] = ()

    @property
    def identity(self) -> str:
        """
        Canonical URL string; key for batch results and the image cache.

        A URL httpx cannot parse keys under its raw text; fetching it then
        fails as a transport error.
        """
        try:
            return str(httpx.URL(self.url))
        except httpx.InvalidURL:
            return self.url


class Transport(typing.Protocol):
    """Anything that can turn a Request into raw bytes + status."""

    def fetch(self, request: Request, /) -> LCR[Response, ErrorInfo]: ...


class HttpTransport:
    """Transport backed by an injected httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @classmethod
    def from_config(cls, config: ClientConfig) -> HttpTransport:
        client = httpx.AsyncClient(
            base_url=config.base_url,
            headers=list(config.headers),
            timeout=config.timeout_s,
            follow_redirects=config.follow_redirects,
        )
        return cls(client)

    def fetch(self, request: Request, /) -> LCR[Response, ErrorInfo]:
        return L.catching_async(
            lambda: self._client.request(request.method, request.url, headers=list(request.headers)),
            on_error=lambda exc: transport_error(f"{type(exc).__name__}: {exc}"),
            catch=(httpx.HTTPError, httpx.InvalidURL),
        ).map(lambda http_response: Response(http_response.content, http_response.status_code))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HttpTransport:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__ = ("HttpTransport", "Request", "Transport")
