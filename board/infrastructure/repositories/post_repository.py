"""Persistence helpers for board posts."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from board.domain.entities import Post, PostPage
from board.infrastructure.models import PostModel

from .reply_repository import ReplyRepository

SEARCH_TYPE_TITLE = "title"
SEARCH_TYPE_CONTENTS = "contents"
SEARCH_TYPE_MEMBER = "id"


class PostRepository:
    """Provide CRUD and paginated search operations for posts.

    ``find_by_id``, ``save`` and ``delete`` are the operations the attachment
    lifecycle relies on.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_id(self, post_id: int, *, include_replies: bool = False) -> Post | None:
        model = self.session.get(PostModel, post_id)
        if model is None:
            return None
        return self._to_entity(model, include_replies=include_replies)

    def list_all(self) -> list[Post]:
        query = self.session.query(PostModel).order_by(PostModel.id.desc())
        return [self._to_entity(model) for model in query.all()]

    def list_page(
        self,
        *,
        page: int,
        page_size: int,
        search_type: str | None = None,
        search_word: str = "",
    ) -> PostPage:
        """Return page ``page`` (1-based) of posts matching the search filter."""

        query = self.session.query(PostModel)
        if search_type == SEARCH_TYPE_TITLE:
            query = query.filter(PostModel.title.contains(search_word, autoescape=True))
        elif search_type == SEARCH_TYPE_CONTENTS:
            query = query.filter(PostModel.contents.contains(search_word, autoescape=True))
        elif search_type == SEARCH_TYPE_MEMBER:
            query = query.filter(PostModel.member_id == search_word)

        total = query.order_by(None).count()
        models = (
            query.order_by(PostModel.id.desc())
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )
        return PostPage(
            items=[self._to_entity(model) for model in models],
            page=page,
            page_size=page_size,
            total=total,
        )

    def list_stored_names(self) -> set[str]:
        rows = self.session.execute(
            select(PostModel.stored_name).where(PostModel.stored_name.is_not(None))
        )
        return {stored_name for (stored_name,) in rows if stored_name}

    def increment_view_count(self, post_id: int) -> None:
        self.session.execute(
            update(PostModel)
            .where(PostModel.id == post_id)
            .values(view_count=PostModel.view_count + 1)
        )
        self.session.commit()

    def save(self, post: Post) -> Post:
        """Insert ``post`` when it has no identifier, otherwise update it."""

        if post.id is None:
            model = PostModel(view_count=post.view_count, like_count=post.like_count)
        else:
            model = self.session.get(PostModel, post.id)
            if model is None:
                msg = f"Post with id {post.id} not found"
                raise ValueError(msg)
        model.member_id = post.member_id
        model.title = post.title
        model.contents = post.contents
        model.original_name = post.original_name
        model.stored_name = post.stored_name
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, post: Post) -> None:
        model = self.session.get(PostModel, post.id)
        if model is None:
            msg = f"Post with id {post.id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _to_entity(model: PostModel, *, include_replies: bool = False) -> Post:
        replies = (
            [ReplyRepository.to_entity(reply) for reply in model.replies]
            if include_replies
            else []
        )
        return Post(
            id=model.id,
            member_id=model.member_id,
            member_name=model.member.member_name if model.member else None,
            title=model.title,
            contents=model.contents,
            view_count=model.view_count,
            like_count=model.like_count,
            original_name=model.original_name,
            stored_name=model.stored_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
            replies=replies,
        )


__all__ = [
    "PostRepository",
    "SEARCH_TYPE_CONTENTS",
    "SEARCH_TYPE_MEMBER",
    "SEARCH_TYPE_TITLE",
]
