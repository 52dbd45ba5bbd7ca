"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskmatrix import __version__
from taskmatrix.api import router
from taskmatrix.config import settings
from taskmatrix.store.tasks import get_task_store

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Starting task board...")
    logger.info(f"Storage file: {settings.storage_path}")
    get_task_store()

    yield

    logger.info("Shutting down task board...")


app = FastAPI(
    title="Task Matrix",
    description="Eisenhower matrix task board",
    version=__version__,
    lifespan=lifespan,
)

# Local front-ends may be served from a different origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount API routes
app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint pointing at the board and API documentation."""
    return {"message": "Task Matrix API", "board": "/api/v1/board", "docs": "/docs"}


def main() -> None:
    """Run the application."""
    uvicorn.run(
        "taskmatrix.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
