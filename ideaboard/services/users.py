"""User queries."""

from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ideaboard.models.user import User


async def get_user(db: AsyncSession, user_id: int) -> Optional[User]:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def username_or_email_taken(db: AsyncSession, username: str, email: str) -> bool:
    result = await db.execute(
        select(User.id).where(or_(User.username == username, User.email == email)).limit(1)
    )
    return result.first() is not None


async def create_user(db: AsyncSession, username: str, email: str, password_hash: str, name: str) -> User:
    user = User(username=username, email=email, password=password_hash, name=name)
    db.add(user)
    await db.flush()
    return user
