"""
Dependency providers for the v1 routers.

Services are built per request on top of the SQLite repositories and
share ``db.transaction`` as their transaction scope.  Tests may swap
them through ``app.dependency_overrides``.
"""

from todolist_api.app.core.db import transaction
from todolist_api.app.repositories import SQLiteToDoRepository, SQLiteUserRepository
from todolist_api.app.services import ToDoService, UserService


def get_todo_service() -> ToDoService:
    return ToDoService(
        SQLiteToDoRepository(),
        SQLiteUserRepository(),
        transaction=transaction,
    )


def get_user_service() -> UserService:
    return UserService(SQLiteUserRepository())
