from __future__ import annotations

from _infra import FakeApi, banner, run

from decoders import ImageCache, Request, Response, fetch_image
from kungfu import Error, Ok

AVATAR = "https://img.example.com/mkoehnke.png"
PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


async def main() -> None:
    banner("05_image_cache: cache-first image fetch")

    api = FakeApi(payloads={AVATAR: Response(PNG, 200)})
    cache = ImageCache()
    request = Request(AVATAR)

    for attempt in ("miss", "hit"):
        match await fetch_image(api, cache, request):
            case Ok(image):
                print(f"{attempt}: {image.format} {image.size} bytes (cache: {len(cache)} / {cache.nbytes} bytes)")
            case Error(info):
                print(f"{attempt}: {info}")

    print(f"purged {cache.purge()} entries")
    await fetch_image(api, cache, request)


if __name__ == "__main__":
    run(main)
