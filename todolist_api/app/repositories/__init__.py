"""
Repository contracts and their SQLite implementations.
"""

from .base import ToDoRepository, UserRepository
from .sqlite import SQLiteToDoRepository, SQLiteUserRepository

__all__ = [
    "ToDoRepository",
    "UserRepository",
    "SQLiteToDoRepository",
    "SQLiteUserRepository",
]
