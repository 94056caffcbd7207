from __future__ import annotations

import httpx
import pytest
from kungfu import Error, Ok

from decoders import (
    BatchPolicy,
    ClientConfig,
    ErrorKind,
    HttpTransport,
    Request,
    Response,
    decode_all,
    fetch_all,
    perform_request,
    perform_request_w,
)

from tests.helpers import FakeTransport, User, mock_transport

pytestmark = pytest.mark.integration

ALICE_URL = "https://api.example.com/users/1"
BOB_URL = "https://api.example.com/users/2"
BAD_URL = "http://[::1"


# =============================================================================
# Config
# =============================================================================


class TestConfig:
    def test_defaults(self) -> None:
        config = ClientConfig()
        assert config.base_url == ""
        assert ("Accept", "application/json") in config.headers

    @pytest.mark.parametrize(
        "kwargs",
        [{"base_url": "ftp://example.com"}, {"timeout_s": 0}, {"timeout_s": -1.0}],
    )
    def test_invalid(self, kwargs) -> None:
        with pytest.raises(ValueError):
            ClientConfig(**kwargs)

    def test_batch_policy(self) -> None:
        assert BatchPolicy().concurrency == 5
        with pytest.raises(ValueError):
            BatchPolicy(concurrency=0)

    @pytest.mark.asyncio
    async def test_transport_from_config(self) -> None:
        async with HttpTransport.from_config(ClientConfig(base_url="https://api.example.com")) as transport:
            assert isinstance(transport, HttpTransport)


# =============================================================================
# HttpTransport
# =============================================================================


class TestHttpTransport:
    def test_request_identity_is_canonical(self) -> None:
        assert Request("HTTPS://API.example.com/users/1").identity == ALICE_URL

    def test_unparseable_url_keys_under_raw_text(self) -> None:
        assert Request(BAD_URL).identity == BAD_URL

    @pytest.mark.asyncio
    async def test_fetch_returns_bytes_and_status(self, alice_bytes: bytes) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=alice_bytes)

        transport = mock_transport(handler)
        result = await transport.fetch(Request(ALICE_URL, headers=(("X-Trace", "1"),)))

        assert result == Ok(Response(alice_bytes, 200))
        assert seen[0].method == "GET"
        assert seen[0].headers["X-Trace"] == "1"

    @pytest.mark.asyncio
    async def test_non_2xx_is_not_judged_by_transport(self) -> None:
        transport = mock_transport(lambda request: httpx.Response(404, content=b"nope"))
        assert await transport.fetch(Request(ALICE_URL)) == Ok(Response(b"nope", 404))

    @pytest.mark.asyncio
    async def test_http_error_becomes_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("offline", request=request)

        result = await mock_transport(handler).fetch(Request(ALICE_URL))

        match result:
            case Error(info):
                assert info.kind is ErrorKind.TRANSPORT
                assert "ConnectError" in info.message
            case _:
                pytest.fail(f"expected transport error, got {result!r}")

    @pytest.mark.asyncio
    async def test_fetch_is_lazy(self) -> None:
        calls: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(str(request.url))
            return httpx.Response(200, content=b"{}")

        lazy = mock_transport(handler).fetch(Request(ALICE_URL))
        assert calls == []
        await lazy
        assert calls == [ALICE_URL]


# =============================================================================
# Single request
# =============================================================================


class TestPerformRequest:
    @pytest.mark.asyncio
    async def test_decodes_user(self, alice_bytes: bytes) -> None:
        transport = mock_transport(lambda request: httpx.Response(200, content=alice_bytes))
        assert await perform_request(transport, Request(ALICE_URL), User) == Ok(User(1, "Alice", "a@x.com"))

    @pytest.mark.asyncio
    async def test_callback_fires_once_with_final_result(self, fake_transport: FakeTransport) -> None:
        received: list[object] = []

        result = await perform_request(fake_transport, Request(ALICE_URL), User, callback=received.append)

        assert received == [result]
        assert result.error.kind is ErrorKind.TRANSPORT

    @pytest.mark.asyncio
    async def test_malformed_url_is_a_transport_error(self) -> None:
        received: list[object] = []
        transport = mock_transport(lambda request: pytest.fail("must not reach the network"))

        result = await perform_request(transport, Request(BAD_URL), User, callback=received.append)

        assert received == [result]
        match result:
            case Error(info):
                assert info.kind is ErrorKind.TRANSPORT
                assert info.message.startswith("InvalidURL")
            case _:
                pytest.fail(f"expected transport error, got {result!r}")

    @pytest.mark.asyncio
    async def test_transport_failure(self, fake_transport: FakeTransport, offline) -> None:
        fake_transport.responses[ALICE_URL] = offline
        assert await perform_request(fake_transport, Request(ALICE_URL), User) == Error(offline)

    @pytest.mark.asyncio
    async def test_writer_variant_logs_request_and_stages(
        self, fake_transport: FakeTransport, alice_bytes: bytes
    ) -> None:
        fake_transport.responses[ALICE_URL] = Response(alice_bytes, 200)

        wr = await perform_request_w(fake_transport, Request(ALICE_URL), User)

        assert wr.result == Ok(User(1, "Alice", "a@x.com"))
        assert wr.log[0] == f"GET {ALICE_URL}"
        assert wr.log[-1] == "decode User: ok"

    @pytest.mark.asyncio
    async def test_writer_variant_transport_failure(self, fake_transport: FakeTransport, offline) -> None:
        fake_transport.responses[ALICE_URL] = offline

        wr = await perform_request_w(fake_transport, Request(ALICE_URL), User)

        assert wr.result == Error(offline)
        assert list(wr.log) == [f"GET {ALICE_URL}", f"transport: {offline}"]


# =============================================================================
# Batch
# =============================================================================


class TestFetchAll:
    @pytest.mark.asyncio
    async def test_two_requests_one_callback(self, fake_transport: FakeTransport, alice_bytes: bytes) -> None:
        fake_transport.responses[ALICE_URL] = Response(alice_bytes, 200)
        fake_transport.responses[BOB_URL] = Response(b'{"id":2,"name":"Bob"}', 200)
        fake_transport.delay_seconds = 0.01
        completions: list[dict] = []

        result = await fetch_all(
            fake_transport,
            [Request(ALICE_URL), Request(BOB_URL)],
            on_complete=completions.append,
        )

        assert len(completions) == 1
        assert set(completions[0]) == {ALICE_URL, BOB_URL}
        assert result == Ok(completions[0])
        assert fake_transport.max_in_flight == 2

    @pytest.mark.asyncio
    async def test_failures_are_reported_per_item(self, fake_transport: FakeTransport, offline) -> None:
        fake_transport.responses[ALICE_URL] = offline
        fake_transport.responses[BOB_URL] = Response(b'{"id":2,"name":"Bob"}', 200)

        results = (await fetch_all(fake_transport, [Request(ALICE_URL), Request(BOB_URL)])).unwrap()

        assert results[ALICE_URL] == Error(offline)
        assert results[BOB_URL] == Ok(Response(b'{"id":2,"name":"Bob"}', 200))

    @pytest.mark.asyncio
    async def test_concurrency_is_bounded(self, fake_transport: FakeTransport) -> None:
        fake_transport.delay_seconds = 0.01
        requests = [Request(f"https://api.example.com/users/{i}") for i in range(6)]

        results = (await fetch_all(fake_transport, requests, policy=BatchPolicy(concurrency=2))).unwrap()

        assert len(results) == 6
        assert fake_transport.max_in_flight == 2

    @pytest.mark.asyncio
    async def test_keys_follow_request_order(self, fake_transport: FakeTransport) -> None:
        requests = [Request(BOB_URL), Request(ALICE_URL)]
        results = (await fetch_all(fake_transport, requests)).unwrap()
        assert list(results) == [BOB_URL, ALICE_URL]

    @pytest.mark.asyncio
    async def test_duplicate_identity_fetched_once(self, fake_transport: FakeTransport) -> None:
        results = (await fetch_all(fake_transport, [Request(ALICE_URL), Request(ALICE_URL)])).unwrap()
        assert list(results) == [ALICE_URL]
        assert fake_transport.calls == [ALICE_URL]

    @pytest.mark.asyncio
    async def test_empty_batch_still_completes(self, fake_transport: FakeTransport) -> None:
        completions: list[dict] = []
        assert await fetch_all(fake_transport, [], on_complete=completions.append) == Ok({})
        assert completions == [{}]

    @pytest.mark.asyncio
    async def test_decode_all(self, fake_transport: FakeTransport, alice_bytes: bytes, offline) -> None:
        fake_transport.responses[ALICE_URL] = Response(alice_bytes, 200)
        fake_transport.responses[BOB_URL] = offline
        missing = "https://api.example.com/users/3"

        raw = (await fetch_all(fake_transport, [Request(u) for u in (ALICE_URL, BOB_URL, missing)])).unwrap()
        decoded = decode_all(raw, User)

        assert decoded[ALICE_URL] == Ok(User(1, "Alice", "a@x.com"))
        assert decoded[BOB_URL] == Error(offline)
        assert decoded[missing].error.kind is ErrorKind.TRANSPORT
        assert decoded[missing].error.status == 404

    @pytest.mark.asyncio
    async def test_malformed_url_is_reported_per_item(self, alice_bytes: bytes) -> None:
        transport = mock_transport(lambda request: httpx.Response(200, content=alice_bytes))
        completions: list[dict] = []

        result = await fetch_all(
            transport,
            [Request(BAD_URL), Request(ALICE_URL)],
            on_complete=completions.append,
        )

        results = result.unwrap()
        assert completions == [results]
        assert list(results) == [BAD_URL, ALICE_URL]
        assert results[BAD_URL].error.kind is ErrorKind.TRANSPORT
        assert results[ALICE_URL] == Ok(Response(alice_bytes, 200))
