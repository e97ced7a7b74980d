"""
User schemas.

Request and response models for user-related operations.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserBase(BaseModel):
    """Base user fields."""

    username: str = Field(min_length=1, max_length=50, pattern=r"^[A-Za-z0-9_-]+$")
    first: str = Field(min_length=1, max_length=100)
    last: str = Field(min_length=1, max_length=100)


class UserResponse(UserBase):
    """User response model."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    display_name: str
    created_at: datetime


class UserCreate(UserBase):
    """User creation request (for internal use)."""


class UserListResponse(BaseModel):
    """User directory response."""

    items: list[UserResponse]
    total: int
