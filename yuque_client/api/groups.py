"""Group and group membership operations."""

from __future__ import annotations

from ..core.models import APIResponse, GroupSerializer, GroupUserSerializer
from .base import BaseAPI


class GroupAPI(BaseAPI):
    async def list_user_groups(
        self, user: int | str, *, timeout: float | None = None
    ) -> list[GroupSerializer]:
        """List the groups ``user`` belongs to."""
        resp = await self.request(
            "GET",
            f"/users/{user}/groups",
            model=list[GroupSerializer],
            timeout=timeout,
        )
        return resp.data

    async def list_public_groups(
        self, offset: int | None = None, *, timeout: float | None = None
    ) -> list[GroupSerializer]:
        resp = await self.request(
            "GET",
            "/groups",
            params={"offset": offset},
            model=list[GroupSerializer],
            timeout=timeout,
        )
        return resp.data

    async def list_group_users(
        self,
        group: int | str,
        offset: int | None = None,
        limit: int | None = None,
        role: int | None = None,
        *,
        timeout: float | None = None,
    ) -> list[GroupUserSerializer]:
        """List the members of ``group``, optionally filtered by ``role``."""
        resp = await self.request(
            "GET",
            f"/groups/{group}/users",
            params={"role": role, "offset": offset, "limit": limit},
            model=list[GroupUserSerializer],
            timeout=timeout,
        )
        return resp.data

    async def get_group(
        self, group: int | str, *, timeout: float | None = None
    ) -> APIResponse[GroupSerializer]:
        """Return the whole envelope so callers can inspect ``abilities``."""
        return await self.request(
            "GET", f"/groups/{group}", model=GroupSerializer, timeout=timeout
        )

    async def create_group(
        self,
        name: str,
        login: str,
        description: str,
        *,
        timeout: float | None = None,
    ) -> GroupSerializer:
        resp = await self.request(
            "POST",
            "/groups",
            json={"name": name, "login": login, "description": description},
            model=GroupSerializer,
            timeout=timeout,
        )
        return resp.data

    async def update_group(
        self,
        group: int | str,
        name: str | None = None,
        login: str | None = None,
        description: str | None = None,
        *,
        timeout: float | None = None,
    ) -> GroupSerializer:
        """Change only the fields that are given."""
        payload = {
            key: value
            for key, value in (
                ("name", name),
                ("login", login),
                ("description", description),
            )
            if value is not None
        }
        resp = await self.request(
            "PUT",
            f"/groups/{group}",
            json=payload,
            model=GroupSerializer,
            timeout=timeout,
        )
        return resp.data

    async def delete_group(
        self, group: int | str, *, timeout: float | None = None
    ) -> None:
        await self.request("DELETE", f"/groups/{group}", timeout=timeout)

    async def add_group_user(
        self,
        group: int | str,
        user: int | str,
        role: int,
        *,
        timeout: float | None = None,
    ) -> GroupUserSerializer:
        """Add ``user`` to ``group`` or change the role of an existing member."""
        resp = await self.request(
            "PUT",
            f"/groups/{group}/users/{user}",
            json={"role": int(role)},
            model=GroupUserSerializer,
            timeout=timeout,
        )
        return resp.data

    async def delete_group_user(
        self, group: int | str, user: int | str, *, timeout: float | None = None
    ) -> None:
        await self.request(
            "DELETE", f"/groups/{group}/users/{user}", timeout=timeout
        )
