"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.infrastructure.logging.log_config import setup_logging
from app.infrastructure.storage.in_memory_issue_repository import InMemoryIssueRepository
from app.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging and report the store in use."""
    settings = get_settings()
    setup_logging()
    logger.info(
        "%s %s started (%s) with an in-memory issue store",
        settings.app_title,
        settings.app_version,
        settings.app_env,
    )

    yield

    logger.info("Shutting down, in-memory issues are discarded")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    Every application gets its own empty issue store.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.issue_repository = InMemoryIssueRepository()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=3000,
        reload=True,
    )
