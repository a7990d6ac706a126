"""Domain entity representing a reply left on a post."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Reply:
    """A comment attached to a post and owned by a member."""

    id: int | None
    post_id: int
    member_id: str
    member_name: str | None
    contents: str
    created_at: datetime | None


__all__ = ["Reply"]
