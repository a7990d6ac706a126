"""Routes for replies attached to posts."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from board.application.use_cases.replies import (
    delete_reply as delete_reply_uc,
    write_reply as write_reply_uc,
)
from board.domain.entities import Member
from board.domain.exceptions import AuthorizationError, NotFoundError
from board.infrastructure.database import get_db
from board.interfaces.api.dependencies import get_current_active_member
from board.interfaces.api.schemas import ReplyCreate, ReplyRead

router = APIRouter(prefix="/posts/{post_id}/replies", tags=["replies"])


@router.post("/", response_model=ReplyRead, status_code=status.HTTP_201_CREATED)
def create_reply(
    post_id: int,
    reply_in: ReplyCreate,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_active_member),
) -> ReplyRead:
    """Leave a reply on the post."""

    try:
        reply = write_reply_uc(
            db,
            post_id=post_id,
            member_id=current_member.member_id,
            contents=reply_in.contents,
        )
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return ReplyRead.model_validate(reply)


@router.delete("/{reply_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_reply(
    post_id: int,
    reply_id: int,
    db: Session = Depends(get_db),
    current_member: Member = Depends(get_current_active_member),
) -> Response:
    """Delete a reply written by the authenticated member."""

    try:
        delete_reply_uc(
            db, reply_id=reply_id, username=current_member.member_id, post_id=post_id
        )
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except AuthorizationError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
