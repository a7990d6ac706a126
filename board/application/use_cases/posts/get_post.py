"""Use case for reading a single post."""

from sqlalchemy.orm import Session

from board.domain.entities import Post
from board.domain.exceptions import NotFoundError
from board.infrastructure.repositories import PostRepository


def get_post(session: Session, post_id: int) -> Post:
    """Return the post with its replies and count the view."""

    repository = PostRepository(session)
    if repository.find_by_id(post_id) is None:
        raise NotFoundError("Post not found")

    repository.increment_view_count(post_id)
    post = repository.find_by_id(post_id, include_replies=True)
    if post is None:  # pragma: no cover - deleted between the two reads
        raise NotFoundError("Post not found")
    return post
