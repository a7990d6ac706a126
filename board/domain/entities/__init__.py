"""Domain entities exposed by the application."""

from .member import Member
from .post import MAX_ORIGINAL_NAME_LENGTH, Post, PostPage
from .reply import Reply

__all__ = [
    "MAX_ORIGINAL_NAME_LENGTH",
    "Member",
    "Post",
    "PostPage",
    "Reply",
]
