"""Use case for retrieving a single member."""

from sqlalchemy.orm import Session

from board.domain.entities import Member
from board.domain.exceptions import NotFoundError
from board.infrastructure.repositories import MemberRepository


def get_member(session: Session, member_id: str) -> Member:
    """Return the requested member or raise an error if it does not exist."""

    member = MemberRepository(session).get(member_id)
    if member is None:
        raise NotFoundError("Member not found")
    return member
