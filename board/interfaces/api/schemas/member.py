"""Member schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class MemberCreate(BaseModel):
    member_id: str = Field(..., min_length=3, max_length=30, pattern=r"^[A-Za-z0-9_.-]+$")
    member_name: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=8)
    email: EmailStr | None = None

    model_config = ConfigDict(extra="forbid")


class MemberRead(BaseModel):
    member_id: str
    member_name: str
    email: EmailStr | None
    enabled: bool
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)
