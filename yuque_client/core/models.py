"""Response models mirroring the JSON shapes returned by Yuque.

The models are implemented using :mod:`pydantic` so that responses are
validated on arrival. Fields the service omits contextually (a document
listing carries no body, for example) are optional and default to ``None``.
Small enumerated integers such as ``public`` or ``role`` are typed as plain
``int``; the enum classes below only name the values known today so that a
new value from the service never breaks deserialization.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum, IntEnum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class RepoPublic(IntEnum):
    """Visibility of a repository."""

    PRIVATE = 0
    PUBLIC = 1
    GROUP_MEMBER = 2  # members of the owning space
    GROUP_ALL = 3  # space members and external contacts
    REPO_MEMBER = 4  # repository members only


class DocPublic(IntEnum):
    PRIVATE = 0
    PUBLIC = 1
    GROUP_MEMBER = 2


class DocStatus(IntEnum):
    DRAFT = 0
    PUBLISHED = 1


class GroupRole(IntEnum):
    """Role of a user inside a group."""

    OWNER = 0
    MEMBER = 1
    READ_ONLY = 2


class DocFormat(str, Enum):
    MARKDOWN = "markdown"
    LAKE = "lake"
    HTML = "html"


class RepoType(str, Enum):
    BOOK = "Book"
    DESIGN = "Design"


class YuqueObject(BaseModel):
    """Fields shared by every entity the service returns.

    Attributes
    ----------
    id:
        Numeric identifier assigned by the service.
    type:
        Entity kind as reported by the service (``"User"``, ``"Book"``...).
    created_at / updated_at:
        Service-side timestamps.
    serializer:
        Name of the server-side serializer, sent as ``_serializer``.

    """

    model_config = ConfigDict(populate_by_name=True)

    id: int
    type: str | None = None
    created_at: datetime
    updated_at: datetime
    serializer: str | None = Field(default=None, alias="_serializer")


class UserSerializer(YuqueObject):
    name: str
    login: str
    avatar_url: str
    books_count: int | None = None
    public_books_count: int | None = None
    followers_count: int
    following_count: int
    public: int | None = None
    description: str | None = None


class GroupSerializer(YuqueObject):
    name: str
    login: str
    avatar_url: str
    owner_id: int | None = None
    books_count: int | None = None
    public_books_count: int | None = None
    topics_count: int
    public_topics_count: int
    members_count: int
    public: int
    description: str | None = None


class GroupUserSerializer(YuqueObject):
    """Membership of :attr:`user` in the group :attr:`group_id`.

    ``role`` takes :class:`GroupRole` values; ``visibility`` and ``status``
    are passed through as the service reports them.
    """

    group_id: int
    user_id: int
    # the service embeds the group in its user-shaped summary form
    group: UserSerializer | None = None
    user: UserSerializer
    role: int
    visibility: int
    status: int


class BookSerializer(YuqueObject):
    """A repository ("book") owned by a user or a group."""

    slug: str
    name: str
    user_id: int
    description: str | None = None
    creator_id: int | None = None
    public: int
    items_count: int
    likes_count: int
    watches_count: int
    content_updated_at: datetime | None = None
    namespace: str | None = None
    user: UserSerializer | None = None

    toc: str | None = None
    toc_yml: str | None = None
    pinned_at: datetime | None = None
    archived_at: datetime | None = None


class DocSerializer(YuqueObject):
    """A document inside a repository.

    Only the identifying fields are guaranteed. The body representations
    (``body``, ``body_html``, ``body_lake`` and the draft variants) are present
    on single-document responses and absent from listings.
    """

    slug: str
    title: str
    book_id: int
    book: BookSerializer | None = None
    user_id: int
    user: UserSerializer | None = None
    creator_id: int | None = None
    last_editor_id: int | None = None
    format: str | None = None
    public: int | None = None
    status: int | None = None
    view_status: int | None = None
    read_status: int | None = None
    likes_count: int | None = None
    comments_count: int | None = None
    hits: int | None = None
    word_count: int | None = None
    description: str | None = None
    cover: str | None = None

    body: str | None = None
    body_html: str | None = None
    body_lake: str | None = None
    body_draft: str | None = None
    body_draft_lake: str | None = None

    content_updated_at: datetime | None = None
    published_at: datetime | None = None
    first_published_at: datetime | None = None


class BaseAbilities(BaseModel):
    read: bool | None = None
    update: bool | None = None
    destroy: bool | None = None


class Abilities(BaseAbilities):
    """Permissions of the token on the returned resource.

    Nested blocks other than ``group_user`` and ``repo`` are kept as extra
    fields.
    """

    model_config = ConfigDict(extra="allow")

    group_user: BaseAbilities = Field(default_factory=BaseAbilities)
    repo: BaseAbilities = Field(default_factory=BaseAbilities)


class APIResponse(BaseModel, Generic[T]):
    """Envelope wrapping every successful response."""

    data: T
    abilities: Abilities | None = None
