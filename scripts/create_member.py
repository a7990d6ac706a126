"""Utility script to register a member directly in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from board.application.use_cases.members import create_member
from board.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for member creation."""

    parser = argparse.ArgumentParser(description="Create a member for the board API.")
    parser.add_argument("member_id", help="Login id of the member")
    parser.add_argument(
        "--name",
        default=None,
        help="Display name of the member (default: the member id)",
    )
    parser.add_argument("--email", default=None, help="Email address (optional)")
    parser.add_argument(
        "--password",
        default=None,
        help="Password. Prompted interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a member using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("No password provided.")

    initialize_database()

    session = SessionLocal()
    try:
        member = create_member(
            session,
            member_id=args.member_id,
            member_name=args.name or args.member_id,
            password=password,
            email=args.email,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the member: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not save the member: {exc}") from exc
    else:
        print(
            "Member created:\n"
            f"  ID: {member.member_id}\n"
            f"  Name: {member.member_name}\n"
            f"  Email: {member.email or '-'}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
