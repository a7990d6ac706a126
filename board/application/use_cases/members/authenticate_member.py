"""Use case for authenticating a member."""

from enum import Enum, auto

from sqlalchemy.orm import Session

from board.infrastructure.repositories import MemberRepository
from board.infrastructure.security import verify_password


class AuthenticationStatus(Enum):
    """Possible outcomes when attempting to authenticate a member."""

    SUCCESS = auto()
    INVALID_CREDENTIALS = auto()
    DISABLED = auto()


def authenticate_member(session: Session, member_id: str, password: str):
    """Return the authentication result along with the member when possible."""

    repository = MemberRepository(session)
    member = repository.get(member_id)

    if not member:
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    if not verify_password(password, member.password):
        return None, AuthenticationStatus.INVALID_CREDENTIALS

    if not member.enabled:
        return member, AuthenticationStatus.DISABLED

    return member, AuthenticationStatus.SUCCESS
