"""Auth routes."""

from __future__ import annotations

from fastapi import APIRouter

from ..deps import Db
from . import service
from .models import LoginRequest, RegisterRequest, RegisterResponse, TokenResponse

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(body: RegisterRequest, db: Db):
    """Create an account; the user's board is provisioned at the same time."""
    user = await service.register_user(db, body.email, body.password, body.name)
    return {"user": user}


@router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest, db: Db):
    user = await service.authenticate(db, body.email, body.password)
    return {"token": service.create_token(user["id"]), "user": user}
