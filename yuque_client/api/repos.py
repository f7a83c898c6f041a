"""Repository ("book") operations."""

from __future__ import annotations

from ..core.models import APIResponse, BookSerializer, RepoType
from ..core.requests import CreateRepoRequest, OwnerType, UpdateRepoRequest
from .base import BaseAPI


class RepoAPI(BaseAPI):
    async def list_repos(
        self,
        owner_type: OwnerType,
        owner: int | str,
        repo_type: RepoType | None = None,
        offset: int | None = None,
        *,
        timeout: float | None = None,
    ) -> list[BookSerializer]:
        """List the repositories of a user or group.

        ``owner`` is the numeric id or login of the owner; ``owner_type``
        tells which kind it is.
        """
        resp = await self.request(
            "GET",
            f"/{OwnerType(owner_type).value}/{owner}/repos",
            params={
                "type": RepoType(repo_type).value if repo_type else None,
                "offset": offset,
            },
            model=list[BookSerializer],
            timeout=timeout,
        )
        return resp.data

    async def get_repo(
        self, repo: int | str, *, timeout: float | None = None
    ) -> APIResponse[BookSerializer]:
        """Return the envelope for ``repo`` (id or ``owner/slug`` namespace)."""
        return await self.request(
            "GET", f"/repos/{repo}", model=BookSerializer, timeout=timeout
        )

    async def create_repo(
        self,
        owner_type: OwnerType,
        owner: int | str,
        req: CreateRepoRequest,
        *,
        timeout: float | None = None,
    ) -> BookSerializer:
        resp = await self.request(
            "POST",
            f"/{OwnerType(owner_type).value}/{owner}/repos",
            json=req,
            model=BookSerializer,
            timeout=timeout,
        )
        return resp.data

    async def update_repo(
        self,
        repo: int | str,
        req: UpdateRepoRequest,
        *,
        timeout: float | None = None,
    ) -> BookSerializer:
        resp = await self.request(
            "PUT", f"/repos/{repo}", json=req, model=BookSerializer, timeout=timeout
        )
        return resp.data

    async def delete_repo(
        self, repo: int | str, *, timeout: float | None = None
    ) -> None:
        await self.request("DELETE", f"/repos/{repo}", timeout=timeout)
