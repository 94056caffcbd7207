from __future__ import annotations

import json

import pytest
from kungfu import Error, Nothing, Ok, Some

from decoders import lift as L
from decoders import parse_error

pytestmark = pytest.mark.unit


def test_pure_and_fail() -> None:
    assert L.pure(1) == Ok(1)
    assert L.fail("e") == Error("e")


def test_from_optional() -> None:
    assert L.from_optional(1, error=lambda: "missing") == Ok(1)
    assert L.from_optional(None, error=lambda: "missing") == Error("missing")


def test_from_optional_does_not_build_error_when_present() -> None:
    def explode() -> str:
        raise AssertionError("error thunk called")

    assert L.from_optional(0, error=explode) == Ok(0)


def test_from_option() -> None:
    assert L.from_option(Some(1), error=lambda: "missing") == Ok(1)
    assert L.from_option(Nothing(), error=lambda: "missing") == Error("missing")


def test_public_surface() -> None:
    assert set(L.__all__) == {"pure", "fail", "from_optional", "from_option", "catching", "catching_async"}
    assert not hasattr(L, "from_pair")


def test_catching() -> None:
    assert L.catching(lambda: json.loads("[1]"), on_error=lambda e: parse_error(str(e))) == Ok([1])
    result = L.catching(lambda: json.loads("[1"), on_error=lambda e: parse_error(type(e).__name__))
    assert result == Error(parse_error("JSONDecodeError"))


@pytest.mark.asyncio
async def test_catching_async_is_lazy() -> None:
    calls: list[str] = []

    async def boom() -> int:
        calls.append("run")
        raise RuntimeError("down")

    lazy = L.catching_async(boom, on_error=lambda e: str(e))
    assert calls == []
    assert await lazy == Error("down")
    assert calls == ["run"]


def test_catching_only_catches_listed_exceptions() -> None:
    assert L.catching(lambda: int("x"), on_error=type, catch=ValueError) == Error(ValueError)
    with pytest.raises(KeyError):
        L.catching(lambda: {}["missing"], on_error=type, catch=ValueError)


@pytest.mark.asyncio
async def test_catching_async_propagates_unlisted_exceptions() -> None:
    async def boom() -> int:
        raise KeyError("k")

    with pytest.raises(KeyError):
        await L.catching_async(boom, on_error=str, catch=(ValueError, TypeError))
