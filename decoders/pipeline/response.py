"""
Response envelope
=================

Bytes + status of a single HTTP response. Lives only until the status
check has consumed it.
"""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Error, Ok, Result

from .._errors import ErrorInfo, transport_error

SUCCESS_RANGE = range(200, 300)


@dataclass(frozen=True, slots=True)
class Response:
    data: bytes
    # 500 when the transport produced bytes but no HTTP status
    status_code: int = 500


def parse_response(response: Response, /) -> Result[bytes, ErrorInfo]:
    """Ok(body) for a 2xx status, transport error otherwise (body ignored)."""
    if response.status_code not in SUCCESS_RANGE:
        return Error(
            transport_error(
                f"unexpected status {response.status_code}",
                status=response.status_code,
            )
        )
    return Ok(response.data)


__all__ = ("Response", "SUCCESS_RANGE", "parse_response")
