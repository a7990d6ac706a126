"""Use case for locating the attachment of a post for download."""

from os import PathLike
from pathlib import Path

from sqlalchemy.orm import Session

from board.domain.exceptions import NotFoundError
from board.infrastructure.attachment_store import AttachmentStore
from board.infrastructure.repositories import PostRepository

from .attachments import PostAttachmentLifecycle


def get_post_attachment(
    session: Session,
    *,
    post_id: int,
    upload_dir: str | PathLike[str],
    store: AttachmentStore | None = None,
) -> tuple[Path, str]:
    """Return the stored file path and original name of the post's attachment."""

    repository = PostRepository(session)
    post = repository.find_by_id(post_id)
    if post is None:
        raise NotFoundError("Post not found")

    lifecycle = PostAttachmentLifecycle(store or AttachmentStore(), repository)
    return lifecycle.resolve_download(post, upload_dir)
