"""
Lift helpers.

    from decoders import lift as L

    L.pure(value)                                   # Ok(value)
    L.from_optional(x, error=...)                   # None -> Error
    L.from_option(opt, error=...)                   # Nothing -> Error
    L.catching(thunk, on_error=..., catch=...)      # exception -> Error
    L.catching_async(thunk, on_error=..., catch=...)  # -> LazyCoroResult
"""

from __future__ import annotations

from .up import catching, catching_async, fail, from_option, from_optional, pure

__all__ = (
    "pure",
    "fail",
    "from_optional",
    "from_option",
    "catching",
    "catching_async",
)
