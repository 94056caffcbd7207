from __future__ import annotations

from _infra import User, banner, run

from decoders import decode
from kungfu import Error, Ok

PAYLOADS: list[tuple[bytes, int]] = [
    (b'{"login":"mkoehnke","id":1,"name":"Mathias","location":"Berlin"}', 200),
    (b'{"login":"ghost","id":2,"name":null}', 200),
    (b'{"login":"broken","id":"3"}', 200),
    (b"{not json", 200),
    (b'{"message":"Not Found"}', 404),
]


async def main() -> None:
    banner("01_quickstart: bytes + status -> User")

    for data, status in PAYLOADS:
        match decode(data, status, User):
            case Ok(user):
                print(f"ok:    {user.login} (name={user.name}, location={user.location.unwrap_or_none()})")
            case Error(info):
                print(f"error: {info}")


if __name__ == "__main__":
    run(main)
