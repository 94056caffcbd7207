"""
Field extraction
================

`<|` and `<|*` as plain functions.

Required vs optional differ in what a *missing* key means; a present key
with the wrong shape fails both:

    key absent           required -> Nothing()      optional -> Some(Nothing())
    key present, ok      required -> Some(v)        optional -> Some(Some(v))
    key present, bad     required -> Nothing()      optional -> Nothing()
"""

from __future__ import annotations

from kungfu import Nothing, Option, Some

from .._types import Decoder, JSONObject
from ..chain import fmap
from .cast import cast


def required[T](obj: JSONObject, key: str, target: type[T] | Decoder[T], /) -> Option[T]:
    """Value at `key` coerced to `target`; Nothing if missing or malformed."""
    if key not in obj:
        return Nothing()
    return cast(obj[key], target)


def optional[T](obj: JSONObject, key: str, target: type[T] | Decoder[T], /) -> Option[Option[T]]:
    """
    Two-level lookup.

    Outer level: is the object well-formed at `key`. Inner level: is the
    value there at all. JSON `null` counts as absent.
    """
    value = obj.get(key)
    if value is None:
        return Some(Nothing())
    return fmap(Some, cast(value, target))


def nullable[T](obj: JSONObject, key: str, target: type[T] | Decoder[T], /) -> Option[T | None]:
    """optional() with the inner level lowered to `None` for constructors."""
    return fmap(lambda inner: inner.unwrap_or_none(), optional(obj, key, target))


__all__ = ("required", "optional", "nullable")
