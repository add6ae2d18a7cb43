"""Comments router — threaded comments on ideas."""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ideaboard.database import get_db
from ideaboard.errors import BadRequest, Forbidden, NotFound
from ideaboard.models.user import User
from ideaboard.routers.auth import get_current_user
from ideaboard.schemas.comment import CommentCreate, CommentOut
from ideaboard.services import comments as comment_service
from ideaboard.services import ideas as idea_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["comments"])


@router.post(
    "/ideas/{idea_id}/comments",
    response_model=CommentOut,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    idea_id: int,
    payload: CommentCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    if not payload.comment:
        raise BadRequest("Comment required.")

    if await idea_service.get_idea_owner_id(db, idea_id) is None:
        raise NotFound("Idea not found.")

    # Threads are two levels deep: replies must point at a top-level
    # comment on the same idea.
    if payload.parent_id is not None:
        parent = await comment_service.get_comment(db, payload.parent_id)
        if parent is None or parent.idea_id != idea_id or parent.parent_id is not None:
            raise BadRequest("Invalid parent comment.")

    comment = await comment_service.create_comment(
        db,
        idea_id=idea_id,
        user_id=current_user.id,
        username=current_user.username,
        text=payload.comment,
        parent_id=payload.parent_id,
    )
    await db.commit()
    return comment


@router.get("/ideas/{idea_id}/comments", response_model=List[CommentOut])
async def list_comments(
    idea_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await comment_service.list_comments(db, idea_id)


@router.delete("/comments/{comment_id}")
async def delete_comment(
    comment_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    comment = await comment_service.get_comment(db, comment_id)
    if comment is None:
        raise NotFound("Comment not found.")
    if comment.user_id != current_user.id:
        raise Forbidden("Not your comment.")

    removed = await comment_service.delete_comment(db, comment)
    await db.commit()
    logger.info(f"User {current_user.id} deleted comment {comment_id} ({removed} rows)")
    return {"success": True}
