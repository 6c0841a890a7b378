"""
User endpoints for API v1.

Users are registered with an email and an optional full name.  The
``/users/{user_id}/todos`` route lists the ToDos a user owns.
"""

import sqlite3
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from todolist_api.app.api.v1.deps import get_todo_service, get_user_service
from todolist_api.app.schemas.todo import ToDoRead
from todolist_api.app.schemas.user import UserCreate, UserRead
from todolist_api.app.services import ToDoService, UserService

router = APIRouter()


@router.get("/", response_model=List[UserRead])
def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    return [UserRead.model_validate(user) for user in service.get_all()]


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Register a user.  Returns HTTP 409 if the email is already taken."""
    try:
        user = service.create(user_in.to_entity())
    except sqlite3.IntegrityError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"User with email {user_in.email} already exists",
        ) from exc
    return UserRead.model_validate(user)


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> UserRead:
    return UserRead.model_validate(service.read_by_id(user_id))


@router.get("/{user_id}/todos", response_model=List[ToDoRead])
def list_user_todos(
    user_id: int,
    service: ToDoService = Depends(get_todo_service),
) -> List[ToDoRead]:
    """Return the ToDos owned by a user; HTTP 404 for an unknown user."""
    return [ToDoRead.from_entity(todo) for todo in service.get_all_todo_of_user(user_id)]
