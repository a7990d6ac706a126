"""Repository implementations for infrastructure layer."""

from .member_repository import MemberRepository
from .post_repository import (
    SEARCH_TYPE_CONTENTS,
    SEARCH_TYPE_MEMBER,
    SEARCH_TYPE_TITLE,
    PostRepository,
)
from .reply_repository import ReplyRepository

__all__ = [
    "MemberRepository",
    "PostRepository",
    "ReplyRepository",
    "SEARCH_TYPE_CONTENTS",
    "SEARCH_TYPE_MEMBER",
    "SEARCH_TYPE_TITLE",
]
