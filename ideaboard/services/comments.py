"""Comment queries."""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ideaboard.models.comment import Comment


async def get_comment(db: AsyncSession, comment_id: int) -> Optional[Comment]:
    result = await db.execute(select(Comment).where(Comment.id == comment_id))
    return result.scalar_one_or_none()


async def list_comments(db: AsyncSession, idea_id: int) -> List[Comment]:
    """All comments on an idea, newest first. Threads are not rebuilt."""
    result = await db.execute(
        select(Comment)
        .where(Comment.idea_id == idea_id)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
    )
    return list(result.scalars().all())


async def create_comment(
    db: AsyncSession,
    idea_id: int,
    user_id: int,
    username: str,
    text: str,
    parent_id: Optional[int] = None,
) -> Comment:
    comment = Comment(
        idea_id=idea_id,
        user_id=user_id,
        username=username,
        comment=text,
        created_at=datetime.now(timezone.utc),
        parent_id=parent_id,
    )
    db.add(comment)
    await db.flush()
    return comment


async def delete_comment(db: AsyncSession, comment: Comment) -> int:
    """Delete a comment; a top-level one takes its replies with it.

    Returns the number of rows removed.
    """
    removed = 0
    if comment.parent_id is None:
        result = await db.execute(delete(Comment).where(Comment.parent_id == comment.id))
        removed += result.rowcount or 0
    result = await db.execute(delete(Comment).where(Comment.id == comment.id))
    removed += result.rowcount or 0
    return removed
