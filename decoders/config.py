"""
Client configuration.

Frozen dataclasses validated on construction; invalid values are
programming errors and raise ValueError immediately.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_HEADERS: tuple[tuple[str, str], ...] = (("Accept", "application/json"),)


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """
    Settings for the httpx client behind HttpTransport.

    `timeout_s` is handed to httpx as is; the decode core itself has no
    timeout policy.
    """

    base_url: str = ""
    headers: tuple[tuple[str, str], ...] = DEFAULT_HEADERS
    timeout_s: float | None = 5.0
    follow_redirects: bool = True

    def __post_init__(self) -> None:
        if self.base_url and not self.base_url.startswith(("http://", "https://")):
            raise ValueError("ClientConfig.base_url must be an http(s) URL")
        if self.timeout_s is not None and self.timeout_s <= 0:
            raise ValueError("ClientConfig.timeout_s must be > 0")


@dataclass(frozen=True, slots=True)
class BatchPolicy:
    """Fan-out settings for fetch_all: max requests in flight."""

    concurrency: int = 5

    def __post_init__(self) -> None:
        if self.concurrency < 1:
            raise ValueError("BatchPolicy.concurrency must be >= 1")


__all__ = ("BatchPolicy", "ClientConfig", "DEFAULT_HEADERS")
