"""Ideas router — list, view, create, patch and delete ideas."""

import json
import logging
from typing import List

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from ideaboard.config import Settings
from ideaboard.database import get_db
from ideaboard.errors import BadRequest, Forbidden, NotFound
from ideaboard.models.user import User
from ideaboard.routers.auth import get_current_user, get_settings
from ideaboard.schemas.idea import (
    IdeaCreate,
    IdeaCreated,
    IdeaDetail,
    IdeaOut,
    IdeaPatch,
    IdeaRow,
    IdeaWithOwner,
)
from ideaboard.services import ideas as idea_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["ideas"])

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


async def _read_idea_payload(request: Request) -> IdeaCreate:
    """
    Parse the create-idea body from JSON or a (multipart) form.
    An uploaded ``file`` part is accepted but not stored.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        async with request.form() as form:
            data = {key: value for key, value in form.items() if isinstance(value, str)}
    else:
        body = await request.body()
        try:
            data = json.loads(body) if body.strip() else {}
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise BadRequest()

    try:
        return IdeaCreate.model_validate(data)
    except ValidationError:
        raise BadRequest()


# ═══════════════════════════════════════════════════════════════
#  Listings
# ═══════════════════════════════════════════════════════════════

@router.get("/ideas", response_model=List[IdeaWithOwner])
async def list_ideas(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await idea_service.list_ideas(db)


@router.get("/my-ideas", response_model=List[IdeaOut])
async def list_my_ideas(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await idea_service.list_user_ideas(db, current_user.id)


@router.get("/ideas/{idea_id}", response_model=IdeaDetail)
async def get_idea(
    idea_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    idea = await idea_service.get_idea_detail(db, idea_id)
    if idea is None:
        raise NotFound("Idea not found.")
    return idea


# ═══════════════════════════════════════════════════════════════
#  Mutations
# ═══════════════════════════════════════════════════════════════

@router.post("/ideas", response_model=IdeaCreated, status_code=status.HTTP_201_CREATED)
async def create_idea(
    request: Request,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    payload = await _read_idea_payload(request)
    if not payload.title:
        raise BadRequest("Title required.")

    idea = await idea_service.create_idea(
        db,
        user_id=current_user.id,
        title=payload.title,
        description=payload.description,
        short_description=payload.short_description,
        area=payload.area,
        status=payload.status,
    )
    await db.commit()
    logger.info(f"User {current_user.id} created idea {idea.id}")
    return IdeaCreated(id=idea.id)


@router.patch("/ideas/{idea_id}", response_model=IdeaRow)
async def update_idea(
    idea_id: int,
    patch: IdeaPatch,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    changes = patch.changes()
    if not changes:
        raise BadRequest("No fields to update.")

    idea = await idea_service.get_idea(db, idea_id)
    if idea is None:
        raise NotFound("Idea not found.")

    if idea.user_id != current_user.id:
        if settings.ENFORCE_IDEA_OWNERSHIP:
            raise Forbidden("Not your idea.")
        logger.warning(
            f"User {current_user.id} is updating idea {idea_id} owned by user {idea.user_id}"
        )

    idea = await idea_service.update_idea(db, idea, changes)
    await db.commit()
    return idea


@router.delete("/ideas/{idea_id}")
async def delete_idea(
    idea_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    owner_id = await idea_service.get_idea_owner_id(db, idea_id)
    if owner_id is None or owner_id != current_user.id:
        raise Forbidden("Not your idea.")

    await idea_service.delete_idea(db, idea_id)
    await db.commit()
    logger.info(f"User {current_user.id} deleted idea {idea_id}")
    return {"success": True}
