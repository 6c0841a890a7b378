"""
Persistence contracts consumed by the service layer.

Services depend on these abstract classes only; the SQLite
implementations live in ``sqlite.py`` and tests substitute mocks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import ToDo, User


class ToDoRepository(ABC):
    """Store of ToDo entities."""

    @abstractmethod
    def upsert(self, todo: ToDo) -> ToDo:
        """Insert ``todo`` when it is not stored yet, update its title otherwise.

        Returns the stored representation, including the id and
        ``created_at`` assigned on insert.
        """

    @abstractmethod
    def find_by_id(self, todo_id: int) -> Optional[ToDo]:
        ...

    @abstractmethod
    def delete(self, todo: ToDo) -> None:
        ...

    @abstractmethod
    def find_all(self) -> List[ToDo]:
        ...

    @abstractmethod
    def find_by_owner_id(self, owner_id: int) -> List[ToDo]:
        ...

    @abstractmethod
    def add_collaborator(self, todo: ToDo, user: User) -> None:
        """Record ``user`` as a collaborator of ``todo``; idempotent."""

    @abstractmethod
    def remove_collaborator(self, todo: ToDo, user: User) -> None:
        """Drop ``user`` from the collaborators of ``todo``; no-op for non-members."""


class UserRepository(ABC):
    """Store of User entities."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        ...

    @abstractmethod
    def upsert(self, user: User) -> User:
        ...

    @abstractmethod
    def find_all(self) -> List[User]:
        ...
