"""
Decode capability
=================

Доменный тип участвует в пайплайне, реализуя один classmethod:

    @dataclass(frozen=True, slots=True)
    class User:
        id: int
        name: str
        email: str | None

        @classmethod
        def decode(cls, json: JSON) -> Option[User]:
            return bind(
                as_object(json),
                lambda d: build(
                    cls,
                    required(d, "id", int),
                    required(d, "name", str),
                    nullable(d, "email", str),
                ),
            )
"""

from __future__ import annotations

import typing

from kungfu import Option

from .._types import JSON


@typing.runtime_checkable
class JSONDecodable(typing.Protocol):
    """Type that can try to construct itself from a JSON value."""

    @classmethod
    def decode(cls, json: JSON, /) -> Option[typing.Self]:
        """Return Some(instance) or Nothing(); never raise on bad shape."""
        ...


__all__ = ("JSONDecodable",)
