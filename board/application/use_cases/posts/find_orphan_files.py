"""Use cases reporting and removing attachment files that no post references."""

import logging
from datetime import timedelta
from os import PathLike

from sqlalchemy.orm import Session

from board.infrastructure.attachment_store import AttachmentStore
from board.infrastructure.repositories import PostRepository

logger = logging.getLogger(__name__)

# A file is written before its post row is committed; younger files may
# still be waiting for that commit.
DEFAULT_ORPHAN_MIN_AGE = timedelta(hours=1)


def find_orphan_files(
    session: Session,
    upload_dir: str | PathLike[str],
    *,
    min_age: timedelta = DEFAULT_ORPHAN_MIN_AGE,
    store: AttachmentStore | None = None,
) -> list[str]:
    """Return the stored names in ``upload_dir`` that no post points to.

    Files modified within the last ``min_age`` are never reported.
    """

    store = store or AttachmentStore()
    on_disk = store.list_stored_names(upload_dir, min_age=min_age)
    referenced = PostRepository(session).list_stored_names()
    return sorted(on_disk - referenced)


def delete_orphan_files(
    session: Session,
    upload_dir: str | PathLike[str],
    *,
    min_age: timedelta = DEFAULT_ORPHAN_MIN_AGE,
    store: AttachmentStore | None = None,
) -> dict[str, bool]:
    """Delete the orphan files in ``upload_dir``.

    Returns every orphan name mapped to whether its file was removed.
    """

    store = store or AttachmentStore()
    results = {}
    for stored_name in find_orphan_files(
        session, upload_dir, min_age=min_age, store=store
    ):
        results[stored_name] = store.delete_if_attachment_exists(upload_dir, stored_name)
    logger.info(
        "Removed %d of %d orphan attachments in %s",
        sum(results.values()),
        len(results),
        upload_dir,
    )
    return results
