"""Shared test configuration: environment, database and helpers."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "board_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["UPLOAD_DIR"] = str(Path(tempfile.gettempdir()) / "board_api_test_uploads")

from board.config import get_settings  # noqa: E402

get_settings.cache_clear()


class BytesUpload:
    """In-memory upload used wherever the request layer would hand over a file."""

    def __init__(
        self,
        filename: str,
        data: bytes,
        *,
        fail: bool = False,
        error: Exception | None = None,
    ) -> None:
        self.filename = filename
        self.data = data
        self.fail = fail or error is not None
        self.error = error or OSError("No space left on device")

    @property
    def original_filename(self) -> str:
        return self.filename

    def is_empty(self) -> bool:
        return not self.filename or not self.data

    def transfer_to(self, destination: Path) -> None:
        if self.fail:
            Path(destination).write_bytes(self.data[:1])
            raise self.error
        Path(destination).write_bytes(self.data)


@pytest.fixture()
def reset_database():
    """Give the test an empty schema and drop it afterwards."""

    from board.infrastructure.database import Base, engine, initialize_database

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(reset_database):
    from board.infrastructure.database import SessionLocal

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"
