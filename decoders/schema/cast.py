"""
JSON casts
==========

Coercion of untyped JSON nodes to concrete Python types (`_JSONParse`).

A target is one of:
- a JSON primitive / container type: str, int, float, bool, dict, list, NoneType
- a JSONDecodable class (anything with `decode(json) -> Option[T]`)
- a decoder callable `JSON -> Option[T]`
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Nothing, Option, Some

from .._types import JSON, Decoder, JSONArray, JSONObject
from ..chain import bind, traverse
from .protocol import JSONDecodable


def _instance_of[T](kind: type[T]) -> Decoder[T]:
    def decoder(value: JSON) -> Option[T]:
        return Some(value) if isinstance(value, kind) else Nothing()

    return decoder


def _to_int(value: JSON) -> Option[int]:
    # bool is an int subclass in Python, not in JSON
    if isinstance(value, int) and not isinstance(value, bool):
        return Some(value)
    return Nothing()


def _to_float(value: JSON) -> Option[float]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Some(float(value))
    return Nothing()


_PRIMITIVES: dict[type, Decoder[typing.Any]] = {
    str: _instance_of(str),
    int: _to_int,
    float: _to_float,
    bool: _instance_of(bool),
    dict: _instance_of(dict),
    list: _instance_of(list),
    type(None): _instance_of(type(None)),
}


def decoder_for[T](target: type[T] | Decoder[T], /) -> Decoder[T]:
    """
    Resolve a target into a decoder callable.

    Raises TypeError for targets that cannot decode JSON at all; that is a
    programming error, not a data error.
    """
    if isinstance(target, type):
        primitive = _PRIMITIVES.get(target)
        if primitive is not None:
            return primitive
        if issubclass(target, JSONDecodable):
            return target.decode
        raise TypeError(f"{target.__name__} cannot be decoded from JSON")
    if callable(target):
        return target
    raise TypeError(f"not a decode target: {target!r}")


def cast[T](value: JSON, target: type[T] | Decoder[T], /) -> Option[T]:
    """Coerce `value` to `target`. Nothing on shape mismatch."""
    return decoder_for(target)(value)


def as_object(json: JSON, /) -> Option[JSONObject]:
    """Some(dict) if the node is a JSON object."""
    return cast(json, dict)


def as_array(json: JSON, /) -> Option[JSONArray]:
    """Some(list) if the node is a JSON array."""
    return cast(json, list)


def list_of[T](target: type[T] | Decoder[T], /) -> Callable[[JSON], Option[list[T]]]:
    """
    Decoder for a homogeneous JSON array.

    Nothing if the node is not an array or any element fails.
    """
    decode = decoder_for(target)

    def decoder(json: JSON) -> Option[list[T]]:
        return bind(as_array(json), lambda items: traverse(items, decode))

    return decoder


__all__ = ("cast", "decoder_for", "as_object", "as_array", "list_of")
