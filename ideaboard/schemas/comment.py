"""Comment Pydantic schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    comment: Optional[str] = None
    parent_id: Optional[int] = Field(default=None, alias="parentId")


class CommentOut(BaseModel):
    id: int
    idea_id: int
    user_id: int
    username: str
    comment: str
    created_at: Optional[datetime] = None
    parent_id: Optional[int] = None

    model_config = {"from_attributes": True}
