"""
Pydantic models for user payloads.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..models import User


class UserBase(BaseModel):
    email: str = Field(..., min_length=3, examples=["user@example.com"])
    full_name: Optional[str] = Field(None, examples=["Jane Doe"])


class UserCreate(UserBase):
    """Schema for registering a user."""

    def to_entity(self) -> User:
        return User(email=self.email, full_name=self.full_name)


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }
