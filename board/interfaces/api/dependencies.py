"""FastAPI dependency utilities."""

from pathlib import Path

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from board.config import get_settings
from board.domain.entities import Member
from board.infrastructure.attachment_store import AttachmentStore
from board.infrastructure.database import get_db
from board.infrastructure.repositories import MemberRepository
from board.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def _credentials_exception(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_member(token: str, db: Session) -> Member:
    """Resolve the authenticated member for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_exception() from exc

    member_id = payload.get("sub")
    if not isinstance(member_id, str) or not member_id:
        raise _credentials_exception()

    member = MemberRepository(db).get(member_id)
    if member is None:
        raise _credentials_exception("Member not found")
    return member


def get_current_member(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> Member:
    """Return the authenticated member from the provided token."""

    return resolve_current_member(token, db)


def get_current_active_member(
    current_member: Member = Depends(get_current_member),
) -> Member:
    """Ensure the authenticated member account is enabled."""

    if not current_member.enabled:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Member account is disabled",
        )
    return current_member


def get_upload_dir() -> Path:
    """Return the configured attachment directory."""

    return Path(get_settings().upload_dir)


def get_attachment_store() -> AttachmentStore:
    return AttachmentStore()
