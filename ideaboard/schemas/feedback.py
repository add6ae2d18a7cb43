"""Feedback Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel


class FeedbackCreate(BaseModel):
    email: Optional[str] = None
    feedback: Optional[str] = None
