"""
In-memory image cache.

Raw bytes keyed by request identity. There is no eviction policy of its
own: the owner (the host under memory pressure, or a test) calls purge()
or discard() when memory has to be given back.
"""

from __future__ import annotations

from kungfu import Nothing, Option, Some


class ImageCache:
    """Explicit cache instance; pass it to fetch_image, do not share globally."""

    def __init__(self) -> None:
        self._entries: dict[str, bytes] = {}

    def get(self, key: str, /) -> Option[bytes]:
        data = self._entries.get(key)
        return Some(data) if data is not None else Nothing()

    def put(self, key: str, data: bytes, /) -> None:
        self._entries[key] = data

    def discard(self, key: str, /) -> bool:
        """Drop one entry; True if it was there."""
        return self._entries.pop(key, None) is not None

    def purge(self) -> int:
        """Drop everything, return how many entries were evicted."""
        evicted = len(self._entries)
        self._entries.clear()
        return evicted

    @property
    def nbytes(self) -> int:
        return sum(len(data) for data in self._entries.values())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ("ImageCache",)
