import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from board.config import get_settings
from board.infrastructure.attachment_store import AttachmentStore
from board.infrastructure.database import engine, initialize_database
from board.interfaces.api.routes import register_routes


def configure_logging() -> None:
    """Apply the configured log level to the root logger."""

    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the database and upload directory, release resources on shutdown."""

    initialize_database()
    AttachmentStore().ensure_directory_exists(get_settings().upload_dir)
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the board FastAPI application."""

    configure_logging()
    app = FastAPI(title="Board API", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
