"""
IdeaBoard — FastAPI application entry-point.

Run with:
    uvicorn ideaboard.main:app --reload
or:
    python -m ideaboard
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ideaboard import __version__
from ideaboard.config import Settings, settings as default_settings
from ideaboard.database import Database
from ideaboard.errors import ApiError

# ── Import routers ──
from ideaboard.routers import auth, comments, feedback, health, ideas, schema

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # basicConfig is a no-op once handlers exist; the level still follows settings.
    logging.getLogger().setLevel(settings.LOG_LEVEL.upper())


# ═══════════════════════════════════════════════════════════════
#  Error handlers
# ═══════════════════════════════════════════════════════════════

async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(status_code=exc.status_code, content={"message": "Route not found"})
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.debug(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request."},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Server error."},
    )


# ═══════════════════════════════════════════════════════════════
#  Application factory
# ═══════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or default_settings
    database = database or Database.from_settings(settings)
    configure_logging(settings)

    # ── Lifespan: open the pool on startup, drain it on shutdown ──
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await database.connect(create_schema=settings.CREATE_SCHEMA_ON_STARTUP)
        try:
            yield
        finally:
            await database.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Share ideas, discuss them in threaded comments, and leave feedback.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # ── CORS: reflect any origin unless an allow-list is configured ──
    if settings.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origin_regex=".*",
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # ── Request logging ──
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        return response

    # ── Error handlers ──
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # ── Register API routers ──
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(ideas.router)
    app.include_router(comments.router)
    app.include_router(feedback.router)
    if settings.ENABLE_SCHEMA_ROUTES:
        logger.warning("Schema bootstrap routes are enabled; they drop tables without authentication")
        app.include_router(schema.router)

    return app


app = create_app()
