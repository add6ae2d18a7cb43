"""
Schema bootstrap router — drop and recreate single tables over HTTP.

Destructive and unauthenticated; only mounted when ENABLE_SCHEMA_ROUTES
is set. Deployments should run ``alembic upgrade head`` instead.

Endpoints:
    GET /api/create_table_users
    GET /api/create_table_ideas
    GET /api/create_table_comments
    GET /api/create_table_feedback
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ideaboard.database import Database
from ideaboard.models import Comment, Feedback, Idea, User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["schema"])


async def _recreate_table(request: Request, model, label: str) -> JSONResponse:
    database: Database = request.app.state.database
    table = model.__table__
    try:
        async with database.engine.begin() as conn:
            await conn.run_sync(table.drop, checkfirst=True)
            await conn.run_sync(table.create)
    except SQLAlchemyError:
        logger.exception(f"Error creating {label.lower()} table")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": f"Error creating {label.lower()} table."},
        )
    logger.warning(f"Table {table.name!r} dropped and recreated over HTTP")
    return JSONResponse(content={"message": f"{label} table created."})


@router.get("/create_table_users")
async def create_table_users(request: Request):
    return await _recreate_table(request, User, "Users")


@router.get("/create_table_ideas")
async def create_table_ideas(request: Request):
    return await _recreate_table(request, Idea, "Ideas")


@router.get("/create_table_comments")
async def create_table_comments(request: Request):
    return await _recreate_table(request, Comment, "Comments")


@router.get("/create_table_feedback")
async def create_table_feedback(request: Request):
    return await _recreate_table(request, Feedback, "Feedback")
