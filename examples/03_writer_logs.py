from __future__ import annotations

from _infra import FakeApi, User, banner, offline, run

from decoders import Request, Response, decode_w, perform_request_w

URL = "https://api.example.com/users/mkoehnke"


async def main() -> None:
    banner("03_writer_logs: stage trace next to the Result")

    wr = decode_w(b'{"login":"mkoehnke","id":1}', 200, User)
    print(f"result={wr.result!r}")
    for line in wr.log:
        print(f"  log: {line}")

    wr = decode_w(b"[1, 2", 200, User)
    print(f"result={wr.result!r}")
    for line in wr.log:
        print(f"  log: {line}")

    api = FakeApi(payloads={URL: Response(b'{"login":"mkoehnke","id":1}', 200)})
    wr = await perform_request_w(api, Request(URL), User)
    print(f"result={wr.result!r}")
    for line in wr.log:
        print(f"  log: {line}")

    api.payloads[URL] = offline()
    wr = await perform_request_w(api, Request(URL), User)
    print(f"result={wr.result!r}")
    for line in wr.log:
        print(f"  log: {line}")


if __name__ == "__main__":
    run(main)
