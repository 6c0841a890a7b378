"""
Pydantic models for ToDo payloads.

The owner is given by id on creation and never changes afterwards, so
``ToDoUpdate`` only carries the title.  Collaborators are managed
through their own endpoints and appear only in ``ToDoRead``.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import ToDo
from .user import UserRead


class ToDoCreate(BaseModel):
    """Schema for creating a ToDo."""

    title: str = Field(..., min_length=1, description="Title of the ToDo")
    owner_id: int = Field(..., description="Id of the user who owns the ToDo")


class ToDoUpdate(BaseModel):
    """Schema for renaming an existing ToDo."""

    title: str = Field(..., min_length=1)


class ToDoRead(BaseModel):
    """Schema for reading a ToDo.

    Collaborators are listed in ascending id order.
    """

    id: int
    title: str
    owner: UserRead
    collaborators: List[UserRead] = []
    created_at: Optional[str] = None

    @classmethod
    def from_entity(cls, todo: ToDo) -> "ToDoRead":
        collaborators = sorted(todo.collaborators, key=lambda user: user.id or 0)
        return cls(
            id=todo.id,
            title=todo.title,
            owner=UserRead.model_validate(todo.owner),
            collaborators=[UserRead.model_validate(user) for user in collaborators],
            created_at=todo.created_at,
        )
