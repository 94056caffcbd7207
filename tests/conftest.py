"""Pytest fixtures."""

from __future__ import annotations

import pytest

from decoders import ErrorInfo, transport_error

from tests.helpers import FakeTransport


@pytest.fixture
def alice_bytes() -> bytes:
    return b'{"id":1,"name":"Alice","email":"a@x.com"}'


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def offline() -> ErrorInfo:
    return transport_error("ConnectError: offline")
