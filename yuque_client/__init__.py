"""Asynchronous client for the Yuque documentation platform API.

This module exposes the client handle, the request and response models and
the error types so that consumers can import them from ``yuque_client``.
"""

from .client import Yuque
from .config import Settings, load_settings
from .core.models import (
    Abilities,
    APIResponse,
    BookSerializer,
    DocFormat,
    DocPublic,
    DocSerializer,
    DocStatus,
    GroupRole,
    GroupSerializer,
    GroupUserSerializer,
    RepoPublic,
    RepoType,
    UserSerializer,
)
from .core.requests import (
    CreateDocRequest,
    CreateRepoRequest,
    OwnerType,
    UpdateDocRequest,
    UpdateRepoRequest,
)
from .errors import (
    ConfigError,
    DeserializationError,
    RemoteError,
    TransportError,
    YuqueError,
)

__all__ = [
    "Abilities",
    "APIResponse",
    "BookSerializer",
    "ConfigError",
    "CreateDocRequest",
    "CreateRepoRequest",
    "DeserializationError",
    "DocFormat",
    "DocPublic",
    "DocSerializer",
    "DocStatus",
    "GroupRole",
    "GroupSerializer",
    "GroupUserSerializer",
    "OwnerType",
    "RemoteError",
    "RepoPublic",
    "RepoType",
    "Settings",
    "TransportError",
    "UpdateDocRequest",
    "UpdateRepoRequest",
    "UserSerializer",
    "Yuque",
    "YuqueError",
    "load_settings",
]
