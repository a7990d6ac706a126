"""SQLAlchemy model for replies."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from board.infrastructure.database import Base
from board.utils import now_in_app_naive_datetime


class ReplyModel(Base):
    """Database representation of a reply left on a post."""

    __tablename__ = "reply"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(
        Integer, ForeignKey("post.id", ondelete="CASCADE"), nullable=False, index=True
    )
    member_id = Column(String(30), ForeignKey("member.member_id"), nullable=False)
    contents = Column(String(2000), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    post = relationship("PostModel", back_populates="replies")
    member = relationship("MemberModel", lazy="joined")


__all__ = ["ReplyModel"]
