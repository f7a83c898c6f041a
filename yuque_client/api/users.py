from __future__ import annotations

from ..core.models import UserSerializer
from .base import BaseAPI


class UserAPI(BaseAPI):
    async def get_auth_user(self, *, timeout: float | None = None) -> UserSerializer:
        """Return the user owning the token."""
        resp = await self.request("GET", "/user", model=UserSerializer, timeout=timeout)
        return resp.data

    async def get_user(
        self, user: int | str, *, timeout: float | None = None
    ) -> UserSerializer:
        """Return a user by numeric id or login."""
        resp = await self.request(
            "GET", f"/users/{user}", model=UserSerializer, timeout=timeout
        )
        return resp.data
