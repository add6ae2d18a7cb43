"""Idea Pydantic schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class IdeaCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    short_description: Optional[str] = None
    area: Optional[str] = None
    status: Optional[str] = None


class IdeaPatch(BaseModel):
    """Partial update. Only fields present in the request body are written."""
    short_description: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class IdeaOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    short_description: Optional[str] = None
    area: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class IdeaRow(IdeaOut):
    """Full table row, as returned after an update."""
    user_id: int


class IdeaWithOwner(IdeaOut):
    user_id: int
    username: str


class IdeaDetail(IdeaWithOwner):
    name: str


class IdeaCreated(BaseModel):
    success: bool = True
    id: int
