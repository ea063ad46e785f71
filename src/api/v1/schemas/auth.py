"""Pydantic schemas for admin login."""

from pydantic import BaseModel, Field

from api.v1.schemas.common import CamelModel


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=256)


class LoginResponse(CamelModel):
    success: bool = True
    token: str
    expires_in: int
