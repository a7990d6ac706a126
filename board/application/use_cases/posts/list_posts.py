"""Use cases for listing and searching posts."""

from sqlalchemy.orm import Session

from board.domain.entities import Post, PostPage
from board.infrastructure.repositories import PostRepository

DEFAULT_PAGE_SIZE = 10


def list_all_posts(session: Session) -> list[Post]:
    """Return every post, newest first."""

    return PostRepository(session).list_all()


def list_posts(
    session: Session,
    *,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    search_type: str | None = None,
    search_word: str = "",
) -> PostPage:
    """Return one page of posts, newest first.

    ``search_type`` selects the filter: ``title`` and ``contents`` match a
    substring, ``id`` matches the author's member id exactly. Any other value
    lists all posts.
    """

    page = max(page, 1)
    page_size = max(page_size, 1)
    return PostRepository(session).list_page(
        page=page,
        page_size=page_size,
        search_type=search_type if search_word else None,
        search_word=search_word,
    )
