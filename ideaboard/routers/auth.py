"""
Authentication router — registration, login and bearer-token identity.

Endpoints:
    POST /api/register  → create an account (no token issued)
    POST /api/login     → exchange email + password for a 1-hour JWT
    GET  /api/me        → the user the presented token belongs to
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from ideaboard.config import Settings
from ideaboard.database import get_db
from ideaboard.errors import BadRequest, InvalidCredentials, Unauthorized
from ideaboard.models.user import User
from ideaboard.schemas.user import Token, UserCreate, UserLogin, UserOut
from ideaboard.security import (
    MAX_PASSWORD_BYTES,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from ideaboard.services import users as user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])

bearer_scheme = HTTPBearer(auto_error=False)


# ═══════════════════════════════════════════════════════════════
#  Dependencies
# ═══════════════════════════════════════════════════════════════

def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    """
    Resolve the ``Authorization: Bearer <token>`` header to a User.
    Raises Unauthorized when the header is missing, the token does not
    verify, or the user it names no longer exists.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Missing or invalid token.")

    try:
        payload = decode_access_token(credentials.credentials, settings)
        user_id = int(payload.get("id"))
    except (JWTError, TypeError, ValueError):
        raise Unauthorized()

    user = await user_service.get_user(db, user_id)
    if user is None:
        raise Unauthorized()
    return user


# ═══════════════════════════════════════════════════════════════
#  Routes
# ═══════════════════════════════════════════════════════════════

@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    if not (payload.username and payload.email and payload.password and payload.name):
        raise BadRequest("All fields required.")
    if len(payload.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise BadRequest("Password too long.")

    if await user_service.username_or_email_taken(db, payload.username, payload.email):
        raise BadRequest("Username or email taken.")

    password_hash = await run_in_threadpool(
        hash_password, payload.password, settings.PASSWORD_HASH_ROUNDS
    )
    try:
        user = await user_service.create_user(
            db, payload.username, payload.email, password_hash, payload.name
        )
        await db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration.
        await db.rollback()
        raise BadRequest("Username or email taken.")
    logger.info(f"Registered user {user.id} ({user.username})")
    return {"success": True}


@router.post("/login", response_model=Token)
async def login(
    payload: UserLogin,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    if not payload.email or not payload.password:
        raise BadRequest("Email & password required.")

    user = await user_service.get_user_by_email(db, payload.email)
    if user is None:
        raise InvalidCredentials()

    if not await run_in_threadpool(verify_password, payload.password, user.password):
        raise InvalidCredentials()

    return Token(token=create_access_token({"id": user.id}, settings))


@router.get("/me", response_model=UserOut)
async def me(current_user: User = Depends(get_current_user)):
    return current_user
