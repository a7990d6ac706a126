"""Persistence layer for member data."""

from __future__ import annotations

from sqlalchemy.orm import Session

from board.domain.entities import Member
from board.infrastructure.models import MemberModel
from board.utils import ensure_app_naive_datetime, now_in_app_naive_datetime


class MemberRepository:
    """Provide lookup and creation for member entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, member_id: str) -> Member | None:
        model = self.session.get(MemberModel, member_id)
        return self._to_entity(model) if model else None

    def exists(self, member_id: str) -> bool:
        return self.session.get(MemberModel, member_id) is not None

    def create(self, member: Member) -> Member:
        model = MemberModel(
            member_id=member.member_id,
            member_name=member.member_name,
            email=member.email,
            password=member.password,
            enabled=member.enabled,
            created_at=(
                ensure_app_naive_datetime(member.created_at)
                or now_in_app_naive_datetime()
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: MemberModel) -> Member:
        return Member(
            member_id=model.member_id,
            member_name=model.member_name,
            email=model.email,
            password=model.password,
            enabled=model.enabled,
            created_at=model.created_at,
        )


__all__ = ["MemberRepository"]
