"""Unit tests for the filesystem attachment store."""

from __future__ import annotations

import logging
import os
import re
from datetime import date, timedelta
from pathlib import Path
from uuid import UUID

import pytest

from board.infrastructure.attachment_store import (
    MAX_EXTENSION_LENGTH,
    AttachmentStore,
    is_upload_present,
)
from conftest import BytesUpload

FIXED_UUID = UUID("d8e91593-f693-4280-9904-10637d85a46f")


@pytest.fixture()
def store() -> AttachmentStore:
    return AttachmentStore()


@pytest.fixture()
def fixed_store() -> AttachmentStore:
    return AttachmentStore(clock=lambda: date(2024, 8, 6), id_factory=lambda: FIXED_UUID)


@pytest.mark.parametrize(
    ("original", "extension"),
    [
        ("resume.docx", ".docx"),
        ("photo.PNG", ".PNG"),
        ("archive.tar.gz", ".gz"),
        ("이력서.hwp", ".hwp"),
    ],
)
def test_unique_name_keeps_extension_and_format(
    store: AttachmentStore, original: str, extension: str
) -> None:
    stored_name = store.create_unique_file_name(original)

    assert stored_name.endswith(extension)
    assert re.fullmatch(r"\d{8}_[0-9a-f-]{36}" + re.escape(extension), stored_name)


def test_unique_name_without_dot_has_no_extension(store: AttachmentStore) -> None:
    stored_name = store.create_unique_file_name("README")

    assert re.fullmatch(r"\d{8}_[0-9a-f-]{36}", stored_name)
    assert not stored_name.endswith(".")


def test_unique_name_is_deterministic_with_fixed_sources(
    fixed_store: AttachmentStore,
) -> None:
    assert (
        fixed_store.create_unique_file_name("resume.doc")
        == "20240806_d8e91593-f693-4280-9904-10637d85a46f.doc"
    )


def test_unique_names_differ_between_calls(store: AttachmentStore) -> None:
    assert store.create_unique_file_name("a.txt") != store.create_unique_file_name("a.txt")


def test_extension_ignores_dots_in_directory_components() -> None:
    assert AttachmentStore.get_extension("backup.v2/notes") == ""
    assert AttachmentStore.get_extension("C:\\docs.old\\plan.xlsx") == ".xlsx"


def test_extension_drops_control_characters() -> None:
    assert AttachmentStore.get_extension("a.p\x00ng") == ".png"
    assert AttachmentStore.get_extension("report\r\n.pdf") == ".pdf"


def test_overlong_extension_is_not_kept(store: AttachmentStore) -> None:
    extension = "." + "x" * MAX_EXTENSION_LENGTH

    stored_name = store.create_unique_file_name("a" + extension)

    assert AttachmentStore.get_extension("a" + extension) == ""
    assert re.fullmatch(r"\d{8}_[0-9a-f-]{36}", stored_name)
    assert AttachmentStore.get_extension("a" + extension[:-1]) == extension[:-1]


def test_ensure_directory_exists_is_idempotent(store: AttachmentStore, tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "uploads"

    first = store.ensure_directory_exists(target)
    second = store.ensure_directory_exists(target)

    assert first == second == target
    assert target.is_dir()


def test_ensure_directory_exists_logs_instead_of_raising(
    store: AttachmentStore, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("x")

    with caplog.at_level(logging.WARNING):
        result = store.ensure_directory_exists(blocker / "uploads")

    assert result == blocker / "uploads"
    assert "Could not create upload directory" in caplog.text


def test_delete_missing_attachment_is_a_no_op(store: AttachmentStore, tmp_path: Path) -> None:
    assert store.delete_if_attachment_exists(tmp_path, "20240101_missing.txt") is False
    assert store.delete_if_attachment_exists(tmp_path / "nowhere", "x.txt") is False


def test_delete_existing_attachment(store: AttachmentStore, tmp_path: Path) -> None:
    (tmp_path / "stored.bin").write_bytes(b"data")

    assert store.delete_if_attachment_exists(tmp_path, "stored.bin") is True
    assert not (tmp_path / "stored.bin").exists()


def test_store_upload_creates_directory_and_writes_bytes(
    fixed_store: AttachmentStore, tmp_path: Path
) -> None:
    upload_dir = tmp_path / "new" / "uploads"

    stored_name = fixed_store.store_upload(BytesUpload("report.pdf", b"%PDF-1.7"), upload_dir)

    assert stored_name == "20240806_d8e91593-f693-4280-9904-10637d85a46f.pdf"
    assert (upload_dir / stored_name).read_bytes() == b"%PDF-1.7"


def test_store_upload_failure_removes_partial_file(
    store: AttachmentStore, tmp_path: Path
) -> None:
    with pytest.raises(OSError):
        store.store_upload(BytesUpload("big.iso", b"0123456789", fail=True), tmp_path)

    assert list(tmp_path.iterdir()) == []


def test_store_upload_with_nul_in_name_writes_clean_file(
    fixed_store: AttachmentStore, tmp_path: Path
) -> None:
    stored_name = fixed_store.store_upload(BytesUpload("a.p\x00ng", b"png"), tmp_path)

    assert stored_name == "20240806_d8e91593-f693-4280-9904-10637d85a46f.png"
    assert (tmp_path / stored_name).read_bytes() == b"png"


def test_store_upload_value_error_removes_partial_file(
    store: AttachmentStore, tmp_path: Path
) -> None:
    upload = BytesUpload("a.png", b"png", error=ValueError("embedded null byte"))

    with pytest.raises(ValueError):
        store.store_upload(upload, tmp_path)

    assert list(tmp_path.iterdir()) == []


def test_delete_with_invalid_name_reports_false(
    store: AttachmentStore, tmp_path: Path
) -> None:
    assert store.delete_if_attachment_exists(tmp_path, "bad\x00name.png") is False


def test_list_stored_names(store: AttachmentStore, tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "nested").mkdir()

    assert store.list_stored_names(tmp_path) == {"a.txt"}
    assert store.list_stored_names(tmp_path / "absent") == set()


def test_list_stored_names_skips_recently_modified_files(
    store: AttachmentStore, tmp_path: Path
) -> None:
    now = 1_700_000_000
    old_file = tmp_path / "old.txt"
    recent_file = tmp_path / "recent.txt"
    old_file.write_text("old")
    recent_file.write_text("recent")
    os.utime(old_file, (now - 3600, now - 3600))
    os.utime(recent_file, (now - 60, now - 60))

    names = store.list_stored_names(tmp_path, min_age=timedelta(hours=1), now=now)

    assert names == {"old.txt"}
    assert store.list_stored_names(tmp_path, now=now) == {"old.txt", "recent.txt"}


def test_upload_presence() -> None:
    assert is_upload_present(BytesUpload("a.txt", b"a"))
    assert not is_upload_present(BytesUpload("a.txt", b""))
    assert not is_upload_present(BytesUpload("", b"a"))
    assert not is_upload_present(None)
