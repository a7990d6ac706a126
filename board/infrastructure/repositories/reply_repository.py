"""Persistence helpers for replies."""

from sqlalchemy.orm import Session

from board.domain.entities import Reply
from board.infrastructure.models import ReplyModel
from board.utils import ensure_app_naive_datetime, now_in_app_naive_datetime


class ReplyRepository:
    """Provide CRUD operations for replies."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, reply_id: int) -> Reply | None:
        model = self.session.get(ReplyModel, reply_id)
        return self.to_entity(model) if model else None

    def create(self, reply: Reply) -> Reply:
        model = ReplyModel(
            post_id=reply.post_id,
            member_id=reply.member_id,
            contents=reply.contents,
            created_at=(
                ensure_app_naive_datetime(reply.created_at)
                or now_in_app_naive_datetime()
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self.to_entity(model)

    def delete(self, reply_id: int) -> None:
        model = self.session.get(ReplyModel, reply_id)
        if model is None:
            msg = f"Reply with id {reply_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def to_entity(model: ReplyModel) -> Reply:
        return Reply(
            id=model.id,
            post_id=model.post_id,
            member_id=model.member_id,
            member_name=model.member.member_name if model.member else None,
            contents=model.contents,
            created_at=model.created_at,
        )


__all__ = ["ReplyRepository"]
