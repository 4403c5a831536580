"""Auth Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    # bcrypt only looks at the first 72 bytes
    password: str = Field(min_length=6, max_length=72)
    name: str = Field(min_length=1)


class LoginRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    id: str
    email: str
    name: str
    created_at: str


class RegisterResponse(BaseModel):
    user: UserResponse


class TokenResponse(BaseModel):
    token: str
    user: UserResponse
