"""Use case for writing a new post."""

from os import PathLike

from sqlalchemy.orm import Session

from board.domain.entities import Post
from board.domain.exceptions import NotFoundError
from board.infrastructure.attachment_store import AttachmentStore, UploadPayload
from board.infrastructure.repositories import MemberRepository, PostRepository

from .attachments import PostAttachmentLifecycle, PostWriteResult


def write_post(
    session: Session,
    *,
    member_id: str,
    title: str,
    contents: str,
    uploaded_file: UploadPayload | None,
    upload_dir: str | PathLike[str],
    store: AttachmentStore | None = None,
) -> PostWriteResult:
    """Save a post written by ``member_id`` together with its optional attachment."""

    if not MemberRepository(session).exists(member_id):
        raise NotFoundError("Member not found")

    post = Post(id=None, member_id=member_id, title=title, contents=contents)
    lifecycle = PostAttachmentLifecycle(store or AttachmentStore(), PostRepository(session))
    return lifecycle.attach_on_create(post, uploaded_file, upload_dir)
