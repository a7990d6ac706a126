"""Use case for deleting a post."""

from os import PathLike

from sqlalchemy.orm import Session

from board.domain.exceptions import NotFoundError
from board.infrastructure.attachment_store import AttachmentStore
from board.infrastructure.repositories import PostRepository

from .attachments import PostAttachmentLifecycle


def delete_post(
    session: Session,
    *,
    post_id: int,
    username: str,
    upload_dir: str | PathLike[str],
    store: AttachmentStore | None = None,
) -> None:
    """Delete a post owned by ``username`` along with its attachment file."""

    repository = PostRepository(session)
    post = repository.find_by_id(post_id)
    if post is None:
        raise NotFoundError("Post not found")

    lifecycle = PostAttachmentLifecycle(store or AttachmentStore(), repository)
    lifecycle.remove_on_delete(post, username, upload_dir)
