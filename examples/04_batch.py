from __future__ import annotations

from _infra import FakeApi, User, banner, offline, run

from decoders import BatchPolicy, BatchResults, Request, Response, decode_all, fetch_all
from kungfu import Error, Ok

BASE = "https://api.example.com/users"


def report(results: BatchResults) -> None:
    print(f"batch complete: {len(results)} entries")


async def main() -> None:
    banner("04_batch: fan-out, one completion, per-item outcomes")

    api = FakeApi(
        payloads={
            f"{BASE}/alice": Response(b'{"login":"alice","id":1}', 200),
            f"{BASE}/bob": Response(b'{"login":"bob","id":2,"name":"Bob"}', 200),
            f"{BASE}/carol": offline(),
        },
        delay_seconds=0.01,
    )
    requests = [Request(f"{BASE}/{login}") for login in ("alice", "bob", "carol", "dave", "alice")]

    raw = (await fetch_all(api, requests, policy=BatchPolicy(concurrency=2), on_complete=report)).unwrap()

    for identity, result in decode_all(raw, User).items():
        match result:
            case Ok(user):
                print(f"{identity}: {user.login}")
            case Error(info):
                print(f"{identity}: {info}")


if __name__ == "__main__":
    run(main)
