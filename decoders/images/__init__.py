from .cache import ImageCache
from .fetch import fetch_image
from .image import Image, ImageFormat, decode_image, sniff_format

__all__ = (
    "Image",
    "ImageCache",
    "ImageFormat",
    "decode_image",
    "fetch_image",
    "sniff_format",
)
