"""
Forum Service
Main FastAPI application with in-memory post, user and session stores
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
import logging

from .config import settings
from .api.errors import register_error_handlers
from .api.routes import auth_router, posts_router

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.DEBUG else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}...")
    yield
    # All state lives in memory and is dropped here
    logger.info(f"Shutting down {settings.APP_NAME}...")


def mount_frontend(app: FastAPI, static_dir: str) -> None:
    """Serve the single page frontend when its directory exists"""
    root = Path(static_dir)
    if not root.is_dir():
        logger.warning(f"Static directory {root} not found, frontend disabled")
        return

    index_file = root / "html" / "index.html"

    @app.get("/", include_in_schema=False)
    async def index():
        return FileResponse(index_file)

    app.mount("/static", StaticFiles(directory=root), name="static")


def create_app() -> FastAPI:
    """Build the FastAPI application"""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Forum backend with posts, comments and votes",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    register_error_handlers(app)

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint"""
        return {
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    app.include_router(auth_router)
    app.include_router(posts_router)

    if settings.STATIC_DIR:
        mount_frontend(app, settings.STATIC_DIR)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "forum_service.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
