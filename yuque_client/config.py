import os
from dataclasses import dataclass

from .errors import ConfigError

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    token: str
    # Subdomain of a team space, e.g. "acme" for https://acme.yuque.com
    space: str | None = None
    timeout: float = DEFAULT_TIMEOUT


def _parse_timeout(raw: str) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(
            f"YUQUE_TIMEOUT must be a number of seconds, got {raw!r}"
        ) from exc
    if timeout <= 0:
        raise ConfigError(f"YUQUE_TIMEOUT must be positive, got {raw!r}")
    return timeout


def load_settings() -> Settings:
    token = os.getenv("YUQUE_TOKEN", "").strip()
    space = os.getenv("YUQUE_SPACE", "").strip()
    return Settings(
        token=token or "",
        space=space or None,
        timeout=_parse_timeout(os.getenv("YUQUE_TIMEOUT", "").strip()),
    )
