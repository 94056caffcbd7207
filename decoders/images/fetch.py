"""
Image fetch
===========

Cache-first fetch: hit -> decode cached bytes, miss -> transport, status
check, decode, then remember the raw bytes.
"""

from __future__ import annotations

from kungfu import Error, LazyCoroResult, Ok, Result, Some

from .._errors import ErrorInfo
from .._types import LCR
from ..chain import chain
from ..pipeline import parse_response
from ..transport import Request, Transport
from .cache import ImageCache
from .image import Image, decode_image


def fetch_image(
    transport: Transport,
    cache: ImageCache,
    request: Request,
) -> LCR[Image, ErrorInfo]:
    """
    Image for `request`, from `cache` when possible.

    Only bytes that decoded into an Image are stored, so a bad payload is
    refetched next time instead of failing from the cache forever.
    """
    key = request.identity

    async def run() -> Result[Image, ErrorInfo]:
        match cache.get(key):
            case Some(data):
                return decode_image(data)
            case _:
                pass

        result = chain(await transport.fetch(request), parse_response, decode_image)
        match result:
            case Ok(image):
                cache.put(key, image.data)
            case Error(_):
                pass
        return result

    return LazyCoroResult(run)


__all__ = ("fetch_image",)
