"""Base interface shared by the per-resource operation mixins."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..core.models import APIResponse
from ..core.requests import RequestBody


class BaseAPI(ABC):
    """Abstract requester the resource mixins are written against."""

    @abstractmethod
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
        """Send one request to ``path`` and return the decoded envelope.

        ``model`` is the type of the envelope's ``data``; when it is ``None``
        the body is ignored and ``None`` is returned (delete calls).
        """
