"""Post schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .reply import ReplyRead


class PostSummaryRead(BaseModel):
    id: int
    member_id: str
    member_name: str | None
    title: str
    view_count: int
    like_count: int
    original_name: str | None
    has_attachment: bool
    created_at: datetime | None
    updated_at: datetime | None


class PostRead(PostSummaryRead):
    contents: str
    replies: list[ReplyRead] = []

    model_config = ConfigDict(from_attributes=True)


class PostWriteRead(PostRead):
    attachment_warning: str | None = None


class PostPageRead(BaseModel):
    items: list[PostSummaryRead]
    page: int
    page_size: int
    total: int
    total_pages: int
