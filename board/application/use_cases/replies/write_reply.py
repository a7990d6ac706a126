"""Use case for writing a reply on a post."""

from sqlalchemy.orm import Session

from board.domain.entities import Reply
from board.domain.exceptions import NotFoundError
from board.infrastructure.repositories import (
    MemberRepository,
    PostRepository,
    ReplyRepository,
)


def write_reply(
    session: Session,
    *,
    post_id: int,
    member_id: str,
    contents: str,
) -> Reply:
    """Attach a reply from ``member_id`` to the post ``post_id``."""

    if not MemberRepository(session).exists(member_id):
        raise NotFoundError("Member not found")
    if PostRepository(session).find_by_id(post_id) is None:
        raise NotFoundError("Post not found")

    reply = Reply(
        id=None,
        post_id=post_id,
        member_id=member_id,
        member_name=None,
        contents=contents,
        created_at=None,
    )
    return ReplyRepository(session).create(reply)
