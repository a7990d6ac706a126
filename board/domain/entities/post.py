"""Domain entity representing a board post and its attachment reference."""

from dataclasses import dataclass, field, replace
from datetime import datetime

from .reply import Reply

# Column width of ``original_name`` in storage.
MAX_ORIGINAL_NAME_LENGTH = 300


@dataclass
class Post:
    """A board entry with an optional single-file attachment.

    ``original_name`` and ``stored_name`` are set or cleared together. The
    post has an attachment exactly when ``stored_name`` is non-empty.
    """

    id: int | None
    member_id: str
    title: str
    contents: str
    member_name: str | None = None
    view_count: int = 0
    like_count: int = 0
    original_name: str | None = None
    stored_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    replies: list[Reply] = field(default_factory=list)

    def has_attachment(self) -> bool:
        """Return ``True`` when the post references a stored file."""

        return bool(self.stored_name)

    def is_owned_by(self, member_id: str) -> bool:
        """Return ``True`` when ``member_id`` wrote the post."""

        return self.member_id == member_id

    def with_attachment(self, original_name: str, stored_name: str) -> "Post":
        return replace(self, original_name=original_name, stored_name=stored_name)

    def without_attachment(self) -> "Post":
        return replace(self, original_name=None, stored_name=None)


@dataclass(frozen=True)
class PostPage:
    """One page of posts along with the pagination counters."""

    items: list[Post]
    page: int
    page_size: int
    total: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return (self.total + self.page_size - 1) // self.page_size


__all__ = ["MAX_ORIGINAL_NAME_LENGTH", "Post", "PostPage"]
