"""Keep a post's attachment file in step with the post record.

The database row and the file on disk are written in two separate steps with
no shared transaction. The order used here is:

* create/update: write the new file first, then persist the post. A crash in
  between leaves an orphan file and no reference to it.
* update with replacement: delete the old file, then write the new one, then
  persist. A crash after the delete leaves the row pointing at a missing file.
* delete: delete the file, then the row. A failed file delete is logged and
  the row is removed anyway, leaving an orphan.

Transfer failures and over-long file names never abort the post write; they
come back to the caller as ``PostWriteResult.attachment_error``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Protocol

from board.domain.entities import MAX_ORIGINAL_NAME_LENGTH, Post
from board.domain.exceptions import AuthorizationError, NotFoundError
from board.infrastructure.attachment_store import (
    AttachmentStore,
    UploadPayload,
    is_upload_present,
    strip_control_characters,
)

logger = logging.getLogger(__name__)


class PostStore(Protocol):
    def find_by_id(self, post_id: int) -> Post | None: ...

    def save(self, post: Post) -> Post: ...

    def delete(self, post: Post) -> None: ...


@dataclass(frozen=True)
class PostWriteResult:
    """The persisted post and, if the upload could not be stored, why."""

    post: Post
    attachment_error: str | None = None


class PostAttachmentLifecycle:
    """Create, replace, remove and resolve the single attachment of a post."""

    def __init__(self, store: AttachmentStore, posts: PostStore) -> None:
        self.store = store
        self.posts = posts

    def attach_on_create(
        self,
        post: Post,
        uploaded_file: UploadPayload | None,
        upload_dir: str | PathLike[str],
    ) -> PostWriteResult:
        """Store ``uploaded_file`` (when given) and persist ``post``."""

        post, error = self._attach(post, uploaded_file, upload_dir)
        return PostWriteResult(post=self.posts.save(post), attachment_error=error)

    def replace_or_remove_on_update(
        self,
        post: Post,
        username: str,
        uploaded_file: UploadPayload | None,
        upload_dir: str | PathLike[str],
        *,
        keep_existing: bool = False,
    ) -> PostWriteResult:
        """Swap the attachment of ``post`` and persist it.

        The current file is deleted whether or not a new upload is supplied,
        so an update without an upload drops the attachment. Pass
        ``keep_existing=True`` to leave the current attachment alone when no
        new file is uploaded.
        """

        self._ensure_owner(post, username, action="update")

        if keep_existing and not is_upload_present(uploaded_file):
            return PostWriteResult(post=self.posts.save(post))

        if post.has_attachment():
            self.store.delete_if_attachment_exists(upload_dir, post.stored_name)
            post = post.without_attachment()

        post, error = self._attach(post, uploaded_file, upload_dir)
        return PostWriteResult(post=self.posts.save(post), attachment_error=error)

    def remove_on_delete(
        self, post: Post, username: str, upload_dir: str | PathLike[str]
    ) -> None:
        """Delete the attachment file of ``post`` and then the post itself."""

        self._ensure_owner(post, username, action="delete")

        if post.has_attachment():
            removed = self.store.delete_if_attachment_exists(upload_dir, post.stored_name)
            if not removed:
                logger.info(
                    "Attachment %s of post %s was not on disk", post.stored_name, post.id
                )

        self.posts.delete(post)

    def resolve_download(
        self, post: Post, upload_dir: str | PathLike[str]
    ) -> tuple[Path, str]:
        """Return the file path and display name of the post's attachment."""

        if not post.has_attachment():
            raise NotFoundError("Post has no attachment")
        path = self.store.resolve_path(upload_dir, post.stored_name)
        return path, post.original_name or post.stored_name

    def _attach(
        self,
        post: Post,
        uploaded_file: UploadPayload | None,
        upload_dir: str | PathLike[str],
    ) -> tuple[Post, str | None]:
        if not is_upload_present(uploaded_file):
            return post, None

        original_name = strip_control_characters(uploaded_file.original_filename)
        if len(original_name) > MAX_ORIGINAL_NAME_LENGTH:
            logger.warning(
                "Saving post without attachment, file name is %d characters long",
                len(original_name),
            )
            return post, (
                f"Attachment name is longer than {MAX_ORIGINAL_NAME_LENGTH} characters"
            )

        try:
            stored_name = self.store.store_upload(uploaded_file, upload_dir)
        except (OSError, ValueError) as exc:
            logger.warning(
                "Saving post without attachment, could not store %s: %s",
                original_name,
                exc,
            )
            return post, f"Attachment {original_name!r} could not be saved"

        return post.with_attachment(original_name, stored_name), None

    @staticmethod
    def _ensure_owner(post: Post, username: str, *, action: str) -> None:
        if not post.is_owned_by(username):
            raise AuthorizationError(f"Not allowed to {action} this post")


__all__ = ["PostAttachmentLifecycle", "PostStore", "PostWriteResult"]
