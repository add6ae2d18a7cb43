"""Feedback router — anonymous feedback, no login required."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ideaboard.database import get_db
from ideaboard.errors import BadRequest
from ideaboard.schemas.feedback import FeedbackCreate
from ideaboard.services import feedback as feedback_service

router = APIRouter(prefix="/api", tags=["feedback"])


@router.post("/feedback", status_code=status.HTTP_201_CREATED)
async def submit_feedback(
    payload: FeedbackCreate,
    db: AsyncSession = Depends(get_db),
):
    if not payload.feedback:
        raise BadRequest("Feedback required.")

    await feedback_service.create_feedback(db, payload.feedback, email=payload.email)
    await db.commit()
    return {"success": True, "message": "Feedback submitted."}
