"""Local filesystem storage for post attachments."""

from __future__ import annotations

import logging
import time
import unicodedata
from collections.abc import Callable
from datetime import date, timedelta
from os import PathLike
from pathlib import Path
from typing import Protocol
from uuid import UUID, uuid4

from board.utils import today_in_app_timezone

logger = logging.getLogger(__name__)

_DATE_FORMAT = "%Y%m%d"
# Longest extension (dot included) carried into a stored name.
MAX_EXTENSION_LENGTH = 20


class UploadPayload(Protocol):
    """An uploaded file as handed over by the request layer."""

    @property
    def original_filename(self) -> str: ...

    def is_empty(self) -> bool: ...

    def transfer_to(self, destination: Path) -> None:
        """Write the uploaded bytes to ``destination``; raise ``OSError`` on failure."""


def is_upload_present(upload: UploadPayload | None) -> bool:
    """Return ``True`` when ``upload`` carries a file worth storing."""

    return upload is not None and not upload.is_empty()


def strip_control_characters(text: str) -> str:
    """Drop control characters such as NUL or newlines from ``text``."""

    return "".join(ch for ch in text if unicodedata.category(ch) != "Cc")


class AttachmentStore:
    """Name, place and remove attachment files inside an upload directory.

    Stored names look like ``20240806_d8e91593-f693-4280-9904-10637d85a46f.doc``:
    the current date, a random UUID and the extension of the original name.
    ``clock`` and ``id_factory`` may be replaced to make names deterministic.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], date] | None = None,
        id_factory: Callable[[], UUID] = uuid4,
    ) -> None:
        self._clock = clock or today_in_app_timezone
        self._id_factory = id_factory

    def ensure_directory_exists(self, path: str | PathLike[str]) -> Path:
        """Create ``path`` (and parents) when missing and return it.

        Creation errors are logged rather than raised; a later write into the
        directory will fail on its own if it really is unusable.
        """

        directory = Path(path)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning("Could not create upload directory %s: %s", directory, exc)
        return directory

    @staticmethod
    def get_extension(file_name: str) -> str:
        """Return the extension of ``file_name`` including the dot, or ``""``.

        Control characters are dropped, and an extension longer than
        ``MAX_EXTENSION_LENGTH`` is not kept at all.
        """

        cleaned = strip_control_characters(file_name)
        base_name = cleaned.replace("\\", "/").rsplit("/", 1)[-1]
        dot_index = base_name.rfind(".")
        if dot_index == -1:
            return ""
        extension = base_name[dot_index:]
        if len(extension) > MAX_EXTENSION_LENGTH:
            return ""
        return extension

    def create_unique_file_name(self, original_file_name: str) -> str:
        extension = self.get_extension(original_file_name)
        date_string = self._clock().strftime(_DATE_FORMAT)
        return f"{date_string}_{self._id_factory()}{extension}"

    @staticmethod
    def resolve_path(directory: str | PathLike[str], stored_name: str) -> Path:
        return Path(directory) / stored_name

    def store_upload(self, upload: UploadPayload, directory: str | PathLike[str]) -> str:
        """Copy ``upload`` into ``directory`` under a fresh stored name.

        Returns the stored name. An ``OSError`` or ``ValueError`` from the
        transfer is re-raised after any partially written file has been removed.
        """

        target_directory = self.ensure_directory_exists(directory)
        stored_name = self.create_unique_file_name(upload.original_filename)
        destination = self.resolve_path(target_directory, stored_name)
        try:
            upload.transfer_to(destination)
        except (OSError, ValueError):
            self.delete_if_attachment_exists(target_directory, stored_name)
            raise
        logger.debug(
            "Stored attachment %s as %s", upload.original_filename, destination
        )
        return stored_name

    def delete_if_attachment_exists(
        self, directory: str | PathLike[str], stored_name: str
    ) -> bool:
        """Remove ``directory/stored_name`` if present.

        Returns ``True`` when a file was removed. A missing file is not an
        error; other failures are logged and reported as ``False``.
        """

        path = self.resolve_path(directory, stored_name)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except (OSError, ValueError) as exc:
            logger.warning("Could not delete attachment %s: %s", path, exc)
            return False
        logger.debug("Deleted attachment %s", path)
        return True

    @staticmethod
    def list_stored_names(
        directory: str | PathLike[str],
        *,
        min_age: timedelta = timedelta(0),
        now: float | None = None,
    ) -> set[str]:
        """Return the names of the regular files in ``directory``.

        Files modified less than ``min_age`` before ``now`` (a POSIX
        timestamp, default the current time) are left out.
        """

        root = Path(directory)
        if not root.is_dir():
            return set()
        files = [entry for entry in root.iterdir() if entry.is_file()]
        if not min_age:
            return {entry.name for entry in files}
        cutoff = (time.time() if now is None else now) - min_age.total_seconds()
        return {entry.name for entry in files if entry.stat().st_mtime <= cutoff}


__all__ = [
    "AttachmentStore",
    "MAX_EXTENSION_LENGTH",
    "UploadPayload",
    "is_upload_present",
    "strip_control_characters",
]
