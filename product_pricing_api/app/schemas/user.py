"""
Pydantic models for user registration and login.
"""

from pydantic import BaseModel, Field


class UserCredentials(BaseModel):
    """Username and password, used both to register and to log in."""

    username: str = Field(..., examples=["admin"])
    password: str = Field(..., examples=["strongpassword"])


class TokenResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    message: str
