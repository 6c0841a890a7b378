"""
Service layer.

Services hold the business rules and receive their repositories
through the constructor, so they can run against the SQLite store in
the application and against mocks in tests.
"""

from .todo_service import ToDoService
from .user_service import UserService

__all__ = ["ToDoService", "UserService"]
