"""Report attachment files that no post references, optionally deleting them."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from datetime import timedelta

from sqlalchemy.exc import SQLAlchemyError

from board.application.use_cases.posts import (
    DEFAULT_ORPHAN_MIN_AGE,
    delete_orphan_files,
    find_orphan_files,
)
from board.config import get_settings
from board.infrastructure.attachment_store import AttachmentStore
from board.infrastructure.database import SessionLocal, initialize_database


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for the orphan sweep."""

    parser = argparse.ArgumentParser(
        description="List files in the upload directory that no post points to.",
    )
    parser.add_argument(
        "--upload-dir",
        default=None,
        help="Directory to inspect (default: the UPLOAD_DIR setting)",
    )
    parser.add_argument(
        "--delete",
        action="store_true",
        help="Delete the orphan files instead of only listing them.",
    )
    parser.add_argument(
        "--min-age",
        type=float,
        default=DEFAULT_ORPHAN_MIN_AGE.total_seconds() / 60,
        metavar="MINUTES",
        help=(
            "Ignore files modified less than this many minutes ago "
            "(default: %(default)g)"
        ),
    )
    args = parser.parse_args(argv)
    if args.min_age < 0:
        parser.error("--min-age must not be negative")
    return args


def main(argv: Sequence[str] | None = None) -> None:
    """Print (and with --delete remove) every orphan attachment."""

    args = parse_args(argv)
    upload_dir = args.upload_dir or get_settings().upload_dir
    min_age = timedelta(minutes=args.min_age)

    initialize_database()

    store = AttachmentStore()
    session = SessionLocal()
    try:
        if args.delete:
            results = delete_orphan_files(
                session, upload_dir, min_age=min_age, store=store
            )
        else:
            results = dict.fromkeys(
                find_orphan_files(session, upload_dir, min_age=min_age, store=store)
            )
    except SQLAlchemyError as exc:
        raise SystemExit(f"Could not read posts from the database: {exc}") from exc
    finally:
        session.close()

    if not results:
        print(f"No orphan attachments in {upload_dir}")
        return

    for stored_name, removed in results.items():
        if args.delete:
            print(f"{'deleted' if removed else 'skipped'} {stored_name}")
        else:
            print(stored_name)


if __name__ == "__main__":
    main()
