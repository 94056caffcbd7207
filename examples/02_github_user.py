from __future__ import annotations

from _infra import User, banner, run

from decoders import ClientConfig, HttpTransport, Request, perform_request
from kungfu import Error, Ok


async def main() -> None:
    banner("02_github_user: live GET against api.github.com")

    config = ClientConfig(
        base_url="https://api.github.com",
        headers=(("Accept", "application/vnd.github+json"),),
        timeout_s=10.0,
    )
    async with HttpTransport.from_config(config) as transport:
        result = await perform_request(
            transport,
            Request("https://api.github.com/users/mkoehnke"),
            User,
            callback=lambda r: print(f"callback: {type(r).__name__}"),
        )

    match result:
        case Ok(user):
            print(f"{user.login} #{user.id}: {user.name}")
        case Error(info):
            # Offline runs end up here with a transport error.
            print(f"error: {info}")


if __name__ == "__main__":
    run(main)
