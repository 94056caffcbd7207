"""
Image decoding
==============

Bytes -> Image by magic signature (PNG, JPEG, GIF, WebP). No pixel
decoding: the image keeps its raw bytes and the recognised format.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from .._errors import ErrorInfo, decode_error


class ImageFormat(enum.StrEnum):
    PNG = "png"
    JPEG = "jpeg"
    GIF = "gif"
    WEBP = "webp"


MAGIC_SIGNATURES: tuple[tuple[bytes, ImageFormat], ...] = (
    (b"\x89PNG\r\n\x1a\n", ImageFormat.PNG),
    (b"\xff\xd8\xff", ImageFormat.JPEG),
    (b"GIF87a", ImageFormat.GIF),
    (b"GIF89a", ImageFormat.GIF),
)


@dataclass(frozen=True, slots=True)
class Image:
    data: bytes
    format: ImageFormat

    @property
    def size(self) -> int:
        return len(self.data)


def sniff_format(data: bytes, /) -> ImageFormat | None:
    for signature, image_format in MAGIC_SIGNATURES:
        if data.startswith(signature):
            return image_format
    # WebP: RIFF....WEBP
    if len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return ImageFormat.WEBP
    return None


def decode_image(data: bytes, /) -> Result[Image, ErrorInfo]:
    """Ok(Image) for a recognised signature, decode error otherwise."""
    image_format = sniff_format(data)
    if image_format is None:
        return Error(decode_error(Image))
    return Ok(Image(data, image_format))


__all__ = ("Image", "ImageFormat", "MAGIC_SIGNATURES", "decode_image", "sniff_format")
