"""Use case for editing a post."""

from dataclasses import replace
from os import PathLike

from sqlalchemy.orm import Session

from board.domain.exceptions import NotFoundError
from board.infrastructure.attachment_store import AttachmentStore, UploadPayload
from board.infrastructure.repositories import PostRepository

from .attachments import PostAttachmentLifecycle, PostWriteResult


def update_post(
    session: Session,
    *,
    post_id: int,
    username: str,
    title: str,
    contents: str,
    uploaded_file: UploadPayload | None,
    upload_dir: str | PathLike[str],
    keep_attachment: bool = False,
    store: AttachmentStore | None = None,
) -> PostWriteResult:
    """Change the title, contents and attachment of a post owned by ``username``.

    The returned post is read back with its replies.
    """

    repository = PostRepository(session)
    current_post = repository.find_by_id(post_id)
    if current_post is None:
        raise NotFoundError("Post not found")

    updated_post = replace(current_post, title=title, contents=contents)
    lifecycle = PostAttachmentLifecycle(store or AttachmentStore(), repository)
    result = lifecycle.replace_or_remove_on_update(
        updated_post,
        username,
        uploaded_file,
        upload_dir,
        keep_existing=keep_attachment,
    )
    saved_post = repository.find_by_id(result.post.id, include_replies=True)
    return replace(result, post=saved_post or result.post)
