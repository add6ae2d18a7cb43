"""Feedback queries."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ideaboard.models.feedback import Feedback


async def create_feedback(db: AsyncSession, text: str, email: Optional[str] = None) -> Feedback:
    entry = Feedback(feedback=text, created_at=datetime.now(timezone.utc))
    if email is not None:
        entry.email = email
    db.add(entry)
    await db.flush()
    return entry
