"""
Business rules for ToDos and their collaborators.

``ToDoService`` validates inputs, enforces the ownership invariant
(the owner of a ToDo is never one of its collaborators) and delegates
persistence to the repositories passed to its constructor.

Lookup-then-write sequences (``delete``, ``rename``,
``add_collaborator`` and ``remove_collaborator``) run inside a
transaction scope so concurrent callers cannot lose each other's
updates or delete the same ToDo twice.  The application passes ``db.transaction``; when no
scope is given the service falls back to an in-process lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, ContextManager, List, Optional

from ..core.exceptions import (
    EntityNotFoundException,
    NullReferenceEntityException,
    UserIsOwnerOfThisToDoException,
)
from ..models import ToDo, User
from ..repositories import ToDoRepository, UserRepository

logger = logging.getLogger(__name__)


class ToDoService:
    """Create, read, delete and share ToDos."""

    def __init__(
        self,
        todo_repository: ToDoRepository,
        user_repository: UserRepository,
        transaction: Optional[Callable[[], ContextManager]] = None,
    ) -> None:
        self.todo_repository = todo_repository
        self.user_repository = user_repository
        if transaction is None:
            lock = threading.RLock()
            transaction = lambda: lock  # noqa: E731
        self._transaction = transaction

    def save(self, todo: Optional[ToDo]) -> ToDo:
        """Insert a new ToDo or update an existing one.

        A ToDo without an id is inserted together with its collaborators;
        one with an id has only its title updated, since collaborators
        change through ``add_collaborator`` and ``remove_collaborator``.
        Returns the stored representation, including the id assigned on
        insert.
        """
        if todo is None:
            logger.warning("Rejected save of a null ToDo")
            raise NullReferenceEntityException("Given ToDo cannot be null")
        if todo.owner is not None and todo.owner in todo.collaborators:
            logger.warning("Rejected save of ToDo %s listing its owner as collaborator", todo.id)
            raise UserIsOwnerOfThisToDoException(
                f"User (id={todo.owner.id}) is the owner of ToDo (id={todo.id})"
            )
        saved = self.todo_repository.upsert(todo)
        if todo.id is None:
            logger.info("Created ToDo %s", saved.id)
        else:
            logger.info("Updated ToDo %s", saved.id)
        return saved

    def rename(self, todo_id: int, title: str) -> ToDo:
        """Change the title of a stored ToDo; owner and collaborators are kept."""
        with self._transaction():
            todo = self.read_by_id(todo_id)
            todo.rename(title)
            saved = self.todo_repository.upsert(todo)
        logger.info("Renamed ToDo %s", todo_id)
        return saved

    def read_by_id(self, todo_id: int) -> ToDo:
        todo = self.todo_repository.find_by_id(todo_id)
        if todo is None:
            raise EntityNotFoundException.for_entity("ToDo", todo_id)
        return todo

    def delete(self, todo_id: int) -> None:
        """Delete a ToDo by id.

        Raises ``EntityNotFoundException`` without issuing a delete when
        the id does not resolve.
        """
        with self._transaction():
            todo = self.read_by_id(todo_id)
            self.todo_repository.delete(todo)
        logger.info("Deleted ToDo %s", todo_id)

    def get_all(self) -> List[ToDo]:
        return list(self.todo_repository.find_all())

    def get_all_todo_of_user(self, user_id: int) -> List[ToDo]:
        """Return the ToDos owned by ``user_id``.

        An unknown user raises ``EntityNotFoundException``; a known user
        who owns nothing gets an empty list.
        """
        self._read_user(user_id)
        return list(self.todo_repository.find_by_owner_id(user_id))

    def add_collaborator(self, todo_id: int, user_id: int) -> ToDo:
        """Share a ToDo with another user.

        Adding a user who is already a collaborator changes nothing.
        The owner cannot be added.
        """
        with self._transaction():
            todo, user = self._resolve_non_owner(todo_id, user_id)
            todo.add_collaborator(user)
            self.todo_repository.add_collaborator(todo, user)
        logger.info("Added collaborator %s to ToDo %s", user_id, todo_id)
        return todo

    def remove_collaborator(self, todo_id: int, user_id: int) -> ToDo:
        """Stop sharing a ToDo with a user.

        Removing a user who is not a collaborator changes nothing.  The
        owner is rejected explicitly since they are never a member.
        """
        with self._transaction():
            todo, user = self._resolve_non_owner(todo_id, user_id)
            todo.remove_collaborator(user)
            self.todo_repository.remove_collaborator(todo, user)
        logger.info("Removed collaborator %s from ToDo %s", user_id, todo_id)
        return todo

    def _read_user(self, user_id: int) -> User:
        user = self.user_repository.find_by_id(user_id)
        if user is None:
            raise EntityNotFoundException.for_entity("User", user_id)
        return user

    def _resolve_non_owner(self, todo_id: int, user_id: int) -> tuple[ToDo, User]:
        # The ToDo is resolved first, so a missing ToDo wins over a missing user.
        todo = self.read_by_id(todo_id)
        user = self._read_user(user_id)
        if todo.is_owned_by(user):
            logger.warning("User %s is the owner of ToDo %s", user_id, todo_id)
            raise UserIsOwnerOfThisToDoException(
                f"User (id={user_id}) is the owner of ToDo (id={todo_id})"
            )
        return todo, user
