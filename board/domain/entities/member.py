"""Domain entity representing a board member."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Member:
    """Core attributes describing a registered member."""

    member_id: str
    member_name: str
    email: str | None
    password: str
    enabled: bool
    created_at: datetime | None


__all__ = ["Member"]
