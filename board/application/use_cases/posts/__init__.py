"""Use cases for managing posts and their attachments."""

from .attachments import PostAttachmentLifecycle, PostWriteResult
from .delete_post import delete_post
from .find_orphan_files import (
    DEFAULT_ORPHAN_MIN_AGE,
    delete_orphan_files,
    find_orphan_files,
)
from .get_post import get_post
from .get_post_attachment import get_post_attachment
from .list_posts import DEFAULT_PAGE_SIZE, list_all_posts, list_posts
from .update_post import update_post
from .write_post import write_post

__all__ = [
    "DEFAULT_ORPHAN_MIN_AGE",
    "DEFAULT_PAGE_SIZE",
    "PostAttachmentLifecycle",
    "PostWriteResult",
    "delete_orphan_files",
    "delete_post",
    "find_orphan_files",
    "get_post",
    "get_post_attachment",
    "list_all_posts",
    "list_posts",
    "update_post",
    "write_post",
]
