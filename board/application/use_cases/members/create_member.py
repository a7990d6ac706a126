"""Use case for signing up a new member."""

from sqlalchemy.orm import Session

from board.domain.entities import Member
from board.infrastructure.repositories import MemberRepository
from board.infrastructure.security import get_password_hash


def create_member(
    session: Session,
    *,
    member_id: str,
    member_name: str,
    password: str,
    email: str | None = None,
) -> Member:
    """Register a member, rejecting member ids that are already taken."""

    repository = MemberRepository(session)
    if repository.exists(member_id):
        raise ValueError("Member id is already registered")

    member = Member(
        member_id=member_id,
        member_name=member_name,
        email=email,
        password=get_password_hash(password),
        enabled=True,
        created_at=None,
    )
    return repository.create(member)
