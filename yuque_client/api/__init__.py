"""Resource operations, one mixin per resource kind."""

from .docs import DocAPI
from .groups import GroupAPI
from .repos import RepoAPI
from .users import UserAPI

__all__ = ["DocAPI", "GroupAPI", "RepoAPI", "UserAPI"]
