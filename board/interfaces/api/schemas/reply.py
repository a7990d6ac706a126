"""Reply schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReplyCreate(BaseModel):
    contents: str = Field(..., min_length=1, max_length=2000)


class ReplyRead(BaseModel):
    id: int
    post_id: int
    member_id: str
    member_name: str | None
    contents: str
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)
