from fastapi import FastAPI

from .auth import router as auth_router
from .members import router as members_router
from .posts import router as posts_router
from .replies import router as replies_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(members_router)
    app.include_router(posts_router)
    app.include_router(replies_router)
