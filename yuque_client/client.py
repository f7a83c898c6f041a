"""Asynchronous client for the Yuque HTTP API.

:class:`Yuque` owns a single :class:`httpx.AsyncClient` carrying the token,
user agent and timeout. The resource operations live in the mixins under
:mod:`yuque_client.api`; they all go through :meth:`Yuque.request`, which
performs exactly one round trip and maps failures onto
:mod:`yuque_client.errors`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from .api.docs import DocAPI
from .api.groups import GroupAPI
from .api.repos import RepoAPI
from .api.users import UserAPI
from .config import DEFAULT_TIMEOUT, Settings
from .core.models import APIResponse
from .core.requests import RequestBody
from .errors import ConfigError, DeserializationError, RemoteError, TransportError

log = logging.getLogger(__name__)

DEFAULT_BASE_API = "https://www.yuque.com/api/v2"
DEFAULT_USER_AGENT = "Yuque-Python-Client"
AUTH_HEADER = "X-Auth-Token"


def _valid_header_value(value: str) -> bool:
    return all(ch == "\t" or " " <= ch <= "~" for ch in value)


class Yuque(UserAPI, GroupAPI, RepoAPI, DocAPI):
    """Handle shared by every operation.

    Parameters
    ----------
    token:
        Personal or team access token, sent as ``X-Auth-Token``.
    space:
        Optional team space subdomain; requests then go to
        ``https://<space>.yuque.com/api/v2``.
    timeout:
        Default timeout in seconds for every request.
    transport:
        Optional :mod:`httpx` transport, mostly for tests.

    The handle is never mutated after construction, so one instance can be
    shared by concurrent tasks.
    """

    def __init__(
        self,
        token: str,
        *,
        space: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not _valid_header_value(token):
            raise ConfigError("token contains characters not allowed in a header")
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError(
                f"timeout must be a positive number of seconds, got {timeout!r}"
            )
        self._space = space
        self._timeout = timeout
        try:
            self._client = httpx.AsyncClient(
                headers={AUTH_HEADER: token, "User-Agent": DEFAULT_USER_AGENT},
                timeout=timeout,
                transport=transport,
            )
        except (OSError, ValueError) as exc:
            raise ConfigError(f"could not build HTTP client: {exc}") from exc

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
    ) -> Yuque:
        return cls(
            settings.token,
            space=settings.space,
            timeout=settings.timeout,
            transport=transport,
        )

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def space(self) -> str | None:
        return self._space

    @property
    def timeout(self) -> float:
        return self._timeout

    @staticmethod
    def build_api(endpoint: str, space: str | None = None) -> str:
        """Return the absolute URL of ``endpoint`` (which starts with ``/``)."""
        if space:
            return f"https://{space}.yuque.com/api/v2{endpoint}"
        return f"{DEFAULT_BASE_API}{endpoint}"

    # ------------------------------------------------------------------
    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: RequestBody | dict[str, Any] | None = None,
        model: Any = None,
        timeout: float | None = None,
    ) -> APIResponse[Any] | None:
        url = self.build_api(path, self._space)
        query = {key: value for key, value in (params or {}).items() if value is not None}
        body = json.to_payload() if isinstance(json, RequestBody) else json

        extra: dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = timeout

        log.debug("%s %s", method, url)
        try:
            response = await self._client.request(
                method, url, params=query, json=body, **extra
            )
        except httpx.RequestError as exc:
            raise TransportError(f"{method} {url} failed: {exc!r}") from exc

        if not response.is_success:
            log.debug("%s %s returned %s", method, url, response.status_code)
            raise RemoteError(response.status_code, response.text)

        if model is None:
            return None
        try:
            return APIResponse[model].model_validate_json(response.content)
        except ValidationError as exc:
            raise DeserializationError(
                f"unexpected response from {method} {url}: {exc}"
            ) from exc

    async def aclose(self) -> None:
        """Close the underlying :class:`httpx.AsyncClient`."""
        await self._client.aclose()

    async def __aenter__(self) -> Yuque:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
