"""Idea queries.

Listings are returned as row mappings shaped like the API payloads, so the
routers can hand them straight to their response models.
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ideaboard.models.comment import Comment
from ideaboard.models.idea import DEFAULT_STATUS, Idea
from ideaboard.models.user import User

IDEA_COLUMNS = (
    Idea.id,
    Idea.title,
    Idea.description,
    Idea.short_description,
    Idea.area,
    Idea.status,
    Idea.created_at,
)

NEWEST_FIRST = (Idea.created_at.desc(), Idea.id.desc())


async def list_ideas(db: AsyncSession) -> List[dict]:
    """Every idea with its owner's id and username, newest first."""
    result = await db.execute(
        select(*IDEA_COLUMNS, User.id.label("user_id"), User.username)
        .join(User, Idea.user_id == User.id)
        .order_by(*NEWEST_FIRST)
    )
    return [dict(row) for row in result.mappings().all()]


async def list_user_ideas(db: AsyncSession, user_id: int) -> List[dict]:
    result = await db.execute(
        select(*IDEA_COLUMNS).where(Idea.user_id == user_id).order_by(*NEWEST_FIRST)
    )
    return [dict(row) for row in result.mappings().all()]


async def get_idea_detail(db: AsyncSession, idea_id: int) -> Optional[dict]:
    """One idea joined with its owner's id, name and username."""
    result = await db.execute(
        select(*IDEA_COLUMNS, User.id.label("user_id"), User.name, User.username)
        .join(User, Idea.user_id == User.id)
        .where(Idea.id == idea_id)
    )
    row = result.mappings().first()
    return dict(row) if row else None


async def get_idea(db: AsyncSession, idea_id: int) -> Optional[Idea]:
    result = await db.execute(select(Idea).where(Idea.id == idea_id))
    return result.scalar_one_or_none()


async def get_idea_owner_id(db: AsyncSession, idea_id: int) -> Optional[int]:
    result = await db.execute(select(Idea.user_id).where(Idea.id == idea_id))
    return result.scalar_one_or_none()


async def create_idea(
    db: AsyncSession,
    user_id: int,
    title: str,
    description: Optional[str] = None,
    short_description: Optional[str] = None,
    area: Optional[str] = None,
    status: Optional[str] = None,
) -> Idea:
    idea = Idea(
        title=title,
        description=description,
        short_description=short_description,
        area=area,
        status=status or DEFAULT_STATUS,
        user_id=user_id,
        created_at=datetime.now(timezone.utc),
    )
    db.add(idea)
    await db.flush()
    return idea


async def update_idea(db: AsyncSession, idea: Idea, changes: dict) -> Idea:
    """Write exactly the given columns in one UPDATE and return the fresh row."""
    await db.execute(
        update(Idea).where(Idea.id == idea.id).values(**changes)
    )
    await db.refresh(idea)
    return idea


async def delete_idea(db: AsyncSession, idea_id: int) -> None:
    """Delete an idea with its comments, replies before their parents."""
    await db.execute(
        delete(Comment).where(Comment.idea_id == idea_id, Comment.parent_id.is_not(None))
    )
    await db.execute(delete(Comment).where(Comment.idea_id == idea_id))
    await db.execute(delete(Idea).where(Idea.id == idea_id))
