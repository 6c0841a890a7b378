"""
Domain entities.

Entities are plain dataclasses.  They carry no persistence logic; the
repositories translate them to and from database rows.
"""

from .todo import ToDo
from .user import User

__all__ = ["ToDo", "User"]
