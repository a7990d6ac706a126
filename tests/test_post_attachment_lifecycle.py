"""Tests for keeping post attachments in step with the post records."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from board.application.use_cases.posts import PostAttachmentLifecycle
from board.domain.entities import MAX_ORIGINAL_NAME_LENGTH, Post
from board.domain.exceptions import AuthorizationError, NotFoundError
from board.infrastructure.attachment_store import AttachmentStore
from conftest import BytesUpload


class InMemoryPostRepository:
    """Dictionary backed stand-in for the SQL post repository."""

    def __init__(self) -> None:
        self.posts: dict[int, Post] = {}
        self._next_id = 1

    def find_by_id(self, post_id: int) -> Post | None:
        return self.posts.get(post_id)

    def save(self, post: Post) -> Post:
        if post.id is None:
            post = replace(post, id=self._next_id)
            self._next_id += 1
        self.posts[post.id] = post
        return post

    def delete(self, post: Post) -> None:
        del self.posts[post.id]


@pytest.fixture()
def repository() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture()
def lifecycle(repository: InMemoryPostRepository) -> PostAttachmentLifecycle:
    return PostAttachmentLifecycle(AttachmentStore(), repository)


def _new_post(owner: str = "alice") -> Post:
    return Post(id=None, member_id=owner, title="Title", contents="Body")


def _alice_post_with(
    lifecycle: PostAttachmentLifecycle, upload_dir: Path, filename: str, data: bytes
) -> Post:
    result = lifecycle.attach_on_create(_new_post(), BytesUpload(filename, data), upload_dir)
    return result.post


def test_create_with_upload_stores_file_and_reference(
    lifecycle: PostAttachmentLifecycle, upload_dir: Path
) -> None:
    result = lifecycle.attach_on_create(
        _new_post(), BytesUpload("resume.docx", b"resume bytes"), upload_dir
    )

    post = result.post
    assert result.attachment_error is None
    assert post.id is not None
    assert post.original_name == "resume.docx"
    assert post.stored_name and post.stored_name.endswith(".docx")
    assert (upload_dir / post.stored_name).read_bytes() == b"resume bytes"


@pytest.mark.parametrize("upload", [None, BytesUpload("", b""), BytesUpload("a.txt", b"")])
def test_create_without_upload_has_no_attachment(
    lifecycle: PostAttachmentLifecycle, upload_dir: Path, upload
) -> None:
    result = lifecycle.attach_on_create(_new_post(), upload, upload_dir)

    assert result.post.original_name is None
    assert result.post.stored_name is None
    assert result.attachment_error is None
    assert not upload_dir.exists()


def test_create_with_failed_transfer_still_saves_post(
    lifecycle: PostAttachmentLifecycle,
    repository: InMemoryPostRepository,
    upload_dir: Path,
) -> None:
    result = lifecycle.attach_on_create(
        _new_post(), BytesUpload("video.mp4", b"frames", fail=True), upload_dir
    )

    assert result.post.id in repository.posts
    assert not result.post.has_attachment()
    assert result.post.original_name is None
    assert "video.mp4" in (result.attachment_error or "")
    assert list(upload_dir.iterdir()) == []


def test_create_with_nul_in_file_name_saves_clean_attachment(
    lifecycle: PostAttachmentLifecycle,
    repository: InMemoryPostRepository,
    upload_dir: Path,
) -> None:
    result = lifecycle.attach_on_create(
        _new_post(), BytesUpload("a.p\x00ng", b"png"), upload_dir
    )

    post = result.post
    assert result.attachment_error is None
    assert repository.find_by_id(post.id) == post
    assert post.original_name == "a.png"
    assert post.stored_name.endswith(".png")
    assert (upload_dir / post.stored_name).read_bytes() == b"png"


def test_create_with_invalid_path_error_still_saves_post(
    lifecycle: PostAttachmentLifecycle,
    repository: InMemoryPostRepository,
    upload_dir: Path,
) -> None:
    upload = BytesUpload("a.png", b"png", error=ValueError("embedded null byte"))

    result = lifecycle.attach_on_create(_new_post(), upload, upload_dir)

    assert result.post.id in repository.posts
    assert not result.post.has_attachment()
    assert "a.png" in (result.attachment_error or "")
    assert list(upload_dir.iterdir()) == []


def test_create_with_overlong_file_name_saves_post_without_file(
    lifecycle: PostAttachmentLifecycle,
    repository: InMemoryPostRepository,
    upload_dir: Path,
) -> None:
    filename = "x" * MAX_ORIGINAL_NAME_LENGTH + ".txt"

    result = lifecycle.attach_on_create(_new_post(), BytesUpload(filename, b"x"), upload_dir)

    assert result.post.id in repository.posts
    assert not result.post.has_attachment()
    assert str(MAX_ORIGINAL_NAME_LENGTH) in (result.attachment_error or "")
    assert not upload_dir.exists()


def test_create_with_longest_allowed_file_name(
    lifecycle: PostAttachmentLifecycle, upload_dir: Path
) -> None:
    filename = "x" * (MAX_ORIGINAL_NAME_LENGTH - 4) + ".txt"

    result = lifecycle.attach_on_create(_new_post(), BytesUpload(filename, b"x"), upload_dir)

    assert result.attachment_error is None
    assert result.post.original_name == filename


def test_update_by_non_owner_is_rejected_and_file_kept(
    lifecycle: PostAttachmentLifecycle, upload_dir: Path
) -> None:
    post = _alice_post_with(lifecycle, upload_dir, "a.png", b"png-a")

    with pytest.raises(AuthorizationError):
        lifecycle.replace_or_remove_on_update(
            post, "bob", BytesUpload("b.png", b"png-b"), upload_dir
        )

    assert (upload_dir / post.stored_name).read_bytes() == b"png-a"


def test_update_with_new_upload_replaces_old_file(
    lifecycle: PostAttachmentLifecycle,
    repository: InMemoryPostRepository,
    upload_dir: Path,
) -> None:
    post = _alice_post_with(lifecycle, upload_dir, "a.png", b"png-a")
    old_stored_name = post.stored_name

    result = lifecycle.replace_or_remove_on_update(
        post, "alice", BytesUpload("b.png", b"png-b"), upload_dir
    )

    updated = repository.find_by_id(post.id)
    assert updated == result.post
    assert not (upload_dir / old_stored_name).exists()
    assert updated.original_name == "b.png"
    assert updated.stored_name != old_stored_name
    assert (upload_dir / updated.stored_name).read_bytes() == b"png-b"


def test_update_without_upload_drops_attachment(
    lifecycle: PostAttachmentLifecycle, upload_dir: Path
) -> None:
    post = _alice_post_with(lifecycle, upload_dir, "a.png", b"png-a")

    result = lifecycle.replace_or_remove_on_update(post, "alice", None, upload_dir)

    assert not result.post.has_attachment()
    assert result.post.original_name is None
    assert not (upload_dir / post.stored_name).exists()


def test_update_keeping_existing_attachment(
    lifecycle: PostAttachmentLifecycle, upload_dir: Path
) -> None:
    post = _alice_post_with(lifecycle, upload_dir, "a.png", b"png-a")
    edited = replace(post, title="Edited")

    result = lifecycle.replace_or_remove_on_update(
        edited, "alice", None, upload_dir, keep_existing=True
    )

    assert result.post.title == "Edited"
    assert result.post.stored_name == post.stored_name
    assert result.post.original_name == "a.png"
    assert (upload_dir / post.stored_name).exists()


def test_keep_existing_is_ignored_when_a_new_file_is_uploaded(
    lifecycle: PostAttachmentLifecycle, upload_dir: Path
) -> None:
    post = _alice_post_with(lifecycle, upload_dir, "a.png", b"png-a")

    result = lifecycle.replace_or_remove_on_update(
        post, "alice", BytesUpload("b.png", b"png-b"), upload_dir, keep_existing=True
    )

    assert result.post.original_name == "b.png"
    assert not (upload_dir / post.stored_name).exists()


def test_update_with_failed_transfer_reports_error(
    lifecycle: PostAttachmentLifecycle, upload_dir: Path
) -> None:
    post = _alice_post_with(lifecycle, upload_dir, "a.png", b"png-a")

    result = lifecycle.replace_or_remove_on_update(
        post, "alice", BytesUpload("b.png", b"png-b", fail=True), upload_dir
    )

    assert result.attachment_error is not None
    assert not result.post.has_attachment()
    assert list(upload_dir.iterdir()) == []


def test_delete_removes_file_and_record(
    lifecycle: PostAttachmentLifecycle,
    repository: InMemoryPostRepository,
    upload_dir: Path,
) -> None:
    post = _alice_post_with(lifecycle, upload_dir, "c.pdf", b"pdf")

    lifecycle.remove_on_delete(post, "alice", upload_dir)

    assert repository.find_by_id(post.id) is None
    assert not (upload_dir / post.stored_name).exists()


def test_delete_proceeds_when_file_already_missing(
    lifecycle: PostAttachmentLifecycle,
    repository: InMemoryPostRepository,
    upload_dir: Path,
) -> None:
    post = _alice_post_with(lifecycle, upload_dir, "c.pdf", b"pdf")
    (upload_dir / post.stored_name).unlink()

    lifecycle.remove_on_delete(post, "alice", upload_dir)

    assert repository.posts == {}


def test_delete_by_non_owner_is_rejected(
    lifecycle: PostAttachmentLifecycle,
    repository: InMemoryPostRepository,
    upload_dir: Path,
) -> None:
    post = _alice_post_with(lifecycle, upload_dir, "c.pdf", b"pdf")

    with pytest.raises(AuthorizationError):
        lifecycle.remove_on_delete(post, "bob", upload_dir)

    assert post.id in repository.posts
    assert (upload_dir / post.stored_name).exists()


def test_resolve_download_returns_path_and_display_name(
    lifecycle: PostAttachmentLifecycle, upload_dir: Path
) -> None:
    post = _alice_post_with(lifecycle, upload_dir, "홍길동의 이력서.doc", b"doc")

    path, display_name = lifecycle.resolve_download(post, upload_dir)

    assert path == upload_dir / post.stored_name
    assert display_name == "홍길동의 이력서.doc"


def test_resolve_download_without_attachment_fails_before_resolving(
    repository: InMemoryPostRepository, upload_dir: Path
) -> None:
    class RecordingStore(AttachmentStore):
        resolved: list[str] = []

        def resolve_path(self, directory, stored_name):
            self.resolved.append(stored_name)
            return super().resolve_path(directory, stored_name)

    store = RecordingStore()
    lifecycle = PostAttachmentLifecycle(store, repository)
    post = lifecycle.attach_on_create(_new_post(), None, upload_dir).post

    with pytest.raises(NotFoundError):
        lifecycle.resolve_download(post, upload_dir)

    assert store.resolved == []
