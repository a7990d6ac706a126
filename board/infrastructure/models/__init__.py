"""ORM models used by the application infrastructure."""

from .member import MemberModel
from .post import PostModel
from .reply import ReplyModel

__all__ = [
    "MemberModel",
    "PostModel",
    "ReplyModel",
]
