"""User Pydantic schemas — registration, login, profile output."""

from typing import Optional

from pydantic import BaseModel


class UserCreate(BaseModel):
    """Fields submitted on registration. Presence is checked by the router."""
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None


class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserOut(BaseModel):
    """Public user representation returned by ``/api/me``."""
    id: int
    username: str
    email: str

    model_config = {"from_attributes": True}


class Token(BaseModel):
    token: str
