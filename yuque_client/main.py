from __future__ import annotations

import asyncio

from .client import Yuque
from .config import load_settings
from .errors import ConfigError, YuqueError
from .logging_config import setup_logging


def main() -> int:
    log = setup_logging()
    try:
        settings = load_settings()
    except ConfigError as exc:
        log.error("Invalid configuration: %s", exc)
        return 2
    if not settings.token:
        log.error(
            "YUQUE_TOKEN is not set. "
            "Export it in your environment before running."
        )
        return 2

    async def runner() -> int:
        try:
            async with Yuque.from_settings(settings) as yuque:
                user = await yuque.get_auth_user()
        except YuqueError as exc:
            log.error("Could not fetch the authenticated user: %s", exc)
            return 1
        print(user.model_dump_json(indent=2, by_alias=True))
        return 0

    return asyncio.run(runner())


if __name__ == "__main__":
    raise SystemExit(main())
