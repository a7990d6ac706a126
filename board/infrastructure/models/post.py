"""SQLAlchemy model for board posts."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from board.domain.entities import MAX_ORIGINAL_NAME_LENGTH
from board.infrastructure.database import Base
from board.utils import now_in_app_naive_datetime


class PostModel(Base):
    """Database representation of a post and its attachment reference."""

    __tablename__ = "post"

    id = Column(Integer, primary_key=True, index=True)
    member_id = Column(
        String(30), ForeignKey("member.member_id"), nullable=False, index=True
    )
    title = Column(String(1000), nullable=False)
    contents = Column(Text, nullable=False)
    view_count = Column(Integer, nullable=False, default=0)
    like_count = Column(Integer, nullable=False, default=0)
    original_name = Column(String(MAX_ORIGINAL_NAME_LENGTH), nullable=True)
    stored_name = Column(String(100), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)

    member = relationship("MemberModel", lazy="joined")
    replies = relationship(
        "ReplyModel",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="ReplyModel.id",
    )


__all__ = ["PostModel"]
