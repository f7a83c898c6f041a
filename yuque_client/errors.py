"""Error taxonomy raised by :class:`~yuque_client.client.Yuque`.

Every failure reaches the caller; nothing here is retried or swallowed.
"""

from __future__ import annotations

import json


class YuqueError(Exception):
    """Base class for all errors raised by the client."""


class ConfigError(YuqueError):
    """The client could not be constructed (bad token or HTTP setup)."""


class TransportError(YuqueError):
    """The request never produced an HTTP response (DNS, TLS, timeout...)."""


class RemoteError(YuqueError):
    """The service answered with a status outside the 2xx range.

    Attributes
    ----------
    status_code:
        Numeric HTTP status returned by the service.
    body:
        Raw response text, kept verbatim.

    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"{status_code} {body}")
        self.status_code = status_code
        self.body = body

    @property
    def message(self) -> str | None:
        """Return the ``message`` field of a JSON error body, if any."""
        try:
            data = json.loads(self.body)
        except ValueError:
            return None
        if isinstance(data, dict) and isinstance(data.get("message"), str):
            return data["message"]
        return None


class DeserializationError(YuqueError):
    """A 2xx response body did not match the expected shape."""
