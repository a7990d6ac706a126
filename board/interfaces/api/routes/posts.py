"""Routes for board posts and their attachments."""

import logging
from pathlib import Path
from urllib.parse import quote_plus

from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    HTTPException,
    Query,
    Response,
    UploadFile,
    status,
)
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from board.application.use_cases.posts import (
    DEFAULT_PAGE_SIZE,
    PostWriteResult,
    delete_post as delete_post_uc,
    get_post as get_post_uc,
    get_post_attachment as get_post_attachment_uc,
    list_all_posts as list_all_posts_uc,
    list_posts as list_posts_uc,
    update_post as update_post_uc,
    write_post as write_post_uc,
)
from board.domain.entities import Member, Post
from board.domain.exceptions import AuthorizationError, NotFoundError
from board.infrastructure.attachment_store import AttachmentStore
from board.infrastructure.database import get_db
from board.interfaces.api.dependencies import (
    get_attachment_store,
    get_current_active_member,
    get_upload_dir,
)
from board.interfaces.api.schemas import (
    PostPageRead,
    PostRead,
    PostSummaryRead,
    PostWriteRead,
    ReplyRead,
)
from board.interfaces.api.uploads import as_payload

router = APIRouter(prefix="/posts", tags=["posts"])
logger = logging.getLogger(__name__)


def _summary_payload(post: Post) -> dict[str, object]:
    return {
        "id": post.id,
        "member_id": post.member_id,
        "member_name": post.member_name,
        "title": post.title,
        "view_count": post.view_count,
        "like_count": post.like_count,
        "original_name": post.original_name,
        "has_attachment": post.has_attachment(),
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def _post_to_summary_model(post: Post) -> PostSummaryRead:
    return PostSummaryRead.model_validate(_summary_payload(post))


def _post_to_read_model(post: Post) -> PostRead:
    payload = {
        **_summary_payload(post),
        "contents": post.contents,
        "replies": [ReplyRead.model_validate(reply) for reply in post.replies],
    }
    return PostRead.model_validate(payload)


def _write_result_to_read_model(result: PostWriteResult) -> PostWriteRead:
    payload = {
        **_post_to_read_model(result.post).model_dump(),
        "attachment_warning": result.attachment_error,
    }
    return PostWriteRead.model_validate(payload)


def _content_disposition(display_name: str) -> str:
    return f"attachment;filename={quote_plus(display_name, encoding='utf-8')}"


@router.get("/", response_model=PostPageRead)
def list_posts(
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=100),
    search_type: str | None = Query(
        None, description="Search target: title, contents or id (author member id)"
    ),
    search_word: str = Query(""),
    db: Session = Depends(get_db),
) -> PostPageRead:
    """Return one page of posts matching the optional search."""

    post_page = list_posts_uc(
        db,
        page=page,
        page_size=page_size,
        search_type=search_type,
        search_word=search_word.strip(),
    )
    return PostPageRead(
        items=[_post_to_summary_model(post) for post in post_page.items],
        page=post_page.page,
        page_size=post_page.page_size,
        total=post_page.total,
        total_pages=post_page.total_pages,
    )


@router.get("/all", response_model=list[PostSummaryRead])
def list_all_posts(db: Session = Depends(get_db)) -> list[PostSummaryRead]:
    """Return every post, newest first."""

    return [_post_to_summary_model(post) for post in list_all_posts_uc(db)]


@router.post("/", response_model=PostWriteRead, status_code=status.HTTP_201_CREATED)
def create_post(
    title: str = Form(..., min_length=1, max_length=1000),
    contents: str = Form(...),
    file: UploadFile | None = File(None),
    db: Session = Depends(get_db),
    upload_dir: Path = Depends(get_upload_dir),
    store: AttachmentStore = Depends(get_attachment_store),
    current_member: Member = Depends(get_current_active_member),
) -> PostWriteRead:
    """Write a post with an optional attachment."""

    try:
        result = write_post_uc(
            db,
            member_id=current_member.member_id,
            title=title,
            contents=contents,
            uploaded_file=as_payload(file),
            upload_dir=upload_dir,
            store=store,
        )
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _write_result_to_read_model(result)


@router.get("/{post_id}", response_model=PostRead)
def read_post(post_id: int, db: Session = Depends(get_db)) -> PostRead:
    """Return the post with its replies and count the view."""

    try:
        post = get_post_uc(db, post_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _post_to_read_model(post)


@router.put("/{post_id}", response_model=PostWriteRead)
def update_post(
    post_id: int,
    title: str = Form(..., min_length=1, max_length=1000),
    contents: str = Form(...),
    file: UploadFile | None = File(None),
    keep_attachment: bool = Form(
        False,
        description="Keep the current attachment when no new file is uploaded",
    ),
    db: Session = Depends(get_db),
    upload_dir: Path = Depends(get_upload_dir),
    store: AttachmentStore = Depends(get_attachment_store),
    current_member: Member = Depends(get_current_active_member),
) -> PostWriteRead:
    """Edit a post written by the authenticated member."""

    try:
        result = update_post_uc(
            db,
            post_id=post_id,
            username=current_member.member_id,
            title=title,
            contents=contents,
            uploaded_file=as_payload(file),
            upload_dir=upload_dir,
            keep_attachment=keep_attachment,
            store=store,
        )
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except AuthorizationError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    return _write_result_to_read_model(result)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: int,
    db: Session = Depends(get_db),
    upload_dir: Path = Depends(get_upload_dir),
    store: AttachmentStore = Depends(get_attachment_store),
    current_member: Member = Depends(get_current_active_member),
) -> Response:
    """Delete a post written by the authenticated member."""

    try:
        delete_post_uc(
            db,
            post_id=post_id,
            username=current_member.member_id,
            upload_dir=upload_dir,
            store=store,
        )
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except AuthorizationError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{post_id}/attachment", response_class=FileResponse)
def download_attachment(
    post_id: int,
    db: Session = Depends(get_db),
    upload_dir: Path = Depends(get_upload_dir),
    store: AttachmentStore = Depends(get_attachment_store),
) -> FileResponse:
    """Stream the post's attachment back under its original name."""

    try:
        path, display_name = get_post_attachment_uc(
            db, post_id=post_id, upload_dir=upload_dir, store=store
        )
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    if not path.is_file():
        logger.warning("Post %s references missing attachment %s", post_id, path)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Attachment file not found",
        )

    return FileResponse(
        path,
        headers={"Content-Disposition": _content_disposition(display_name)},
    )


__all__ = ["router"]
