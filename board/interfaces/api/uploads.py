"""Adapter exposing FastAPI uploads through the attachment payload interface."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from fastapi import UploadFile


class UploadFilePayload:
    """Wrap an ``UploadFile`` so the attachment store can consume it."""

    def __init__(self, upload: UploadFile) -> None:
        self._upload = upload

    @property
    def original_filename(self) -> str:
        return self._upload.filename or ""

    def is_empty(self) -> bool:
        if not self.original_filename:
            return True
        size = self._upload.size
        if size is None:
            stream = self._upload.file
            position = stream.tell()
            stream.seek(0, os.SEEK_END)
            size = stream.tell()
            stream.seek(position)
        return size == 0

    def transfer_to(self, destination: Path) -> None:
        stream = self._upload.file
        stream.seek(0)
        with open(destination, "wb") as target:
            shutil.copyfileobj(stream, target)


def as_payload(upload: UploadFile | None) -> UploadFilePayload | None:
    """Return ``upload`` wrapped for the attachment store, or ``None``."""

    if upload is None:
        return None
    return UploadFilePayload(upload)


__all__ = ["UploadFilePayload", "as_payload"]
