"""SQLAlchemy model for the member table."""

from sqlalchemy import Boolean, Column, DateTime, String

from board.infrastructure.database import Base
from board.utils import now_in_app_naive_datetime


class MemberModel(Base):
    """Database representation of a board member."""

    __tablename__ = "member"

    member_id = Column(String(30), primary_key=True)
    member_name = Column(String(50), nullable=False)
    email = Column(String(120), nullable=True)
    password = Column(String(255), nullable=False)
    enabled = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["MemberModel"]
