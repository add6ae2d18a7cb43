"""Health check router."""

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ideaboard.database import get_db

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/ping")
async def ping(db: AsyncSession = Depends(get_db)):
    """Round-trip to the database and report its clock."""
    db_time = (await db.execute(select(func.now()))).scalar()
    return {"pong": True, "dbTime": db_time}
