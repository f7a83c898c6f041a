"""Request bodies sent on create and update calls.

Update models have every field optional. Unset fields are left out of the
JSON body so the service keeps their current value.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import DocFormat, RepoPublic, RepoType


class OwnerType(str, Enum):
    """Kind of owner a repository lives under, used as a path segment."""

    USER = "users"
    GROUP = "groups"


class RequestBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body for this request, without unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CreateRepoRequest(RequestBody):
    name: str
    slug: str
    description: str
    public: RepoPublic = RepoPublic.PRIVATE
    type: RepoType = RepoType.BOOK


class UpdateRepoRequest(RequestBody):
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    public: RepoPublic | None = None
    toc: str | None = None


class CreateDocRequest(RequestBody):
    title: str
    slug: str
    format: DocFormat | None = None
    body: str


class UpdateDocRequest(RequestBody):
    """Partial update of a document.

    ``force_asl`` is sent as ``_force_asl``. The service only understands
    ``1``: any positive value is stored as ``1`` and zero drops the field.
    """

    title: str | None = None
    slug: str | None = None
    body: str | None = None
    force_asl: int | None = Field(default=None, alias="_force_asl")

    @field_validator("force_asl")
    @classmethod
    def _normalize_force_asl(cls, value: int | None) -> int | None:
        if value is None:
            return None
        return 1 if value > 0 else None
