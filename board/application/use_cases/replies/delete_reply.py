"""Use case for deleting a reply."""

from sqlalchemy.orm import Session

from board.domain.exceptions import AuthorizationError, NotFoundError
from board.infrastructure.repositories import ReplyRepository


def delete_reply(
    session: Session,
    *,
    reply_id: int,
    username: str,
    post_id: int | None = None,
) -> None:
    """Delete a reply written by ``username``.

    When ``post_id`` is given the reply must also belong to that post.
    """

    repository = ReplyRepository(session)
    reply = repository.get(reply_id)
    if reply is None or (post_id is not None and reply.post_id != post_id):
        raise NotFoundError("Reply not found")
    if reply.member_id != username:
        raise AuthorizationError("Not allowed to delete this reply")
    repository.delete(reply_id)
