"""Document operations."""

from __future__ import annotations

from collections.abc import Iterable

from ..core.models import DocSerializer
from ..core.requests import CreateDocRequest, UpdateDocRequest
from .base import BaseAPI


class DocAPI(BaseAPI):
    async def list_docs(
        self,
        repo: int | str,
        offset: int | None = None,
        limit: int | None = None,
        optional_properties: Iterable[str] | None = None,
        *,
        timeout: float | None = None,
    ) -> list[DocSerializer]:
        """List the documents of ``repo``.

        Parameters
        ----------
        repo:
            Repository id or ``owner/slug`` namespace.
        offset, limit:
            Pagination window; left out of the query when ``None``.
        optional_properties:
            Extra fields to include, such as ``"hits"``.

        """
        props = None
        if optional_properties is not None:
            props = ",".join(optional_properties)
        resp = await self.request(
            "GET",
            f"/repos/{repo}/docs",
            params={"offset": offset, "limit": limit, "optional_properties": props},
            model=list[DocSerializer],
            timeout=timeout,
        )
        return resp.data

    async def get_doc(
        self,
        repo: int | str,
        doc: int | str,
        raw: bool = False,
        *,
        timeout: float | None = None,
    ) -> DocSerializer:
        """Return one document; ``raw`` asks for unrendered source."""
        resp = await self.request(
            "GET",
            f"/repos/{repo}/docs/{doc}",
            params={"raw": 1 if raw else None},
            model=DocSerializer,
            timeout=timeout,
        )
        return resp.data

    async def create_doc(
        self,
        repo: int | str,
        req: CreateDocRequest,
        *,
        timeout: float | None = None,
    ) -> DocSerializer:
        resp = await self.request(
            "POST",
            f"/repos/{repo}/docs",
            json=req,
            model=DocSerializer,
            timeout=timeout,
        )
        return resp.data

    async def update_doc(
        self,
        repo: int | str,
        doc_id: int,
        req: UpdateDocRequest,
        *,
        timeout: float | None = None,
    ) -> DocSerializer:
        resp = await self.request(
            "PUT",
            f"/repos/{repo}/docs/{doc_id}",
            json=req,
            model=DocSerializer,
            timeout=timeout,
        )
        return resp.data

    async def delete_doc(
        self, repo: int | str, doc_id: int, *, timeout: float | None = None
    ) -> None:
        await self.request("DELETE", f"/repos/{repo}/docs/{doc_id}", timeout=timeout)
