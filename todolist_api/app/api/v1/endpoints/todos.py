"""
ToDo endpoints for API v1.

Handlers are plain ``def`` functions: the service layer is synchronous
and FastAPI runs such handlers in its threadpool, one request per
thread.  Domain exceptions raised by the services are turned into HTTP
responses by the handlers registered in ``main.create_app``.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from todolist_api.app.api.v1.deps import get_todo_service, get_user_service
from todolist_api.app.models import ToDo
from todolist_api.app.schemas.todo import ToDoCreate, ToDoRead, ToDoUpdate
from todolist_api.app.services import ToDoService, UserService

router = APIRouter()


@router.get("/", response_model=List[ToDoRead])
def list_todos(service: ToDoService = Depends(get_todo_service)) -> List[ToDoRead]:
    """Return every ToDo in id order."""
    return [ToDoRead.from_entity(todo) for todo in service.get_all()]


@router.post("/", response_model=ToDoRead, status_code=status.HTTP_201_CREATED)
def create_todo(
    todo_in: ToDoCreate,
    service: ToDoService = Depends(get_todo_service),
    users: UserService = Depends(get_user_service),
) -> ToDoRead:
    """Create a ToDo owned by ``owner_id``.

    Returns HTTP 404 if the owner does not exist.
    """
    owner = users.read_by_id(todo_in.owner_id)
    todo = service.save(ToDo(title=todo_in.title, owner=owner))
    return ToDoRead.from_entity(todo)


@router.get("/{todo_id}", response_model=ToDoRead)
def get_todo(todo_id: int, service: ToDoService = Depends(get_todo_service)) -> ToDoRead:
    return ToDoRead.from_entity(service.read_by_id(todo_id))


@router.put("/{todo_id}", response_model=ToDoRead)
def update_todo(
    todo_id: int,
    todo_in: ToDoUpdate,
    service: ToDoService = Depends(get_todo_service),
) -> ToDoRead:
    """Rename a ToDo.  Owner and collaborators are left untouched."""
    return ToDoRead.from_entity(service.rename(todo_id, todo_in.title))


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_todo(todo_id: int, service: ToDoService = Depends(get_todo_service)) -> None:
    service.delete(todo_id)
    return None


@router.post("/{todo_id}/collaborators/{user_id}", response_model=ToDoRead)
def add_collaborator(
    todo_id: int,
    user_id: int,
    service: ToDoService = Depends(get_todo_service),
) -> ToDoRead:
    """Share a ToDo with a user.

    Returns HTTP 409 when the user owns the ToDo.
    """
    return ToDoRead.from_entity(service.add_collaborator(todo_id, user_id))


@router.delete("/{todo_id}/collaborators/{user_id}", response_model=ToDoRead)
def remove_collaborator(
    todo_id: int,
    user_id: int,
    service: ToDoService = Depends(get_todo_service),
) -> ToDoRead:
    return ToDoRead.from_entity(service.remove_collaborator(todo_id, user_id))
