"""
SQLite implementations of the repository contracts.

All queries use parameterized statements.  Every method obtains its
cursor from ``db.get_cursor``, so calls made inside ``db.transaction``
share the transaction's connection and calls made outside it commit
on their own.
"""

from __future__ import annotations

import sqlite3
from typing import Dict, Iterable, List, Optional, Set

from ..core.db import get_cursor
from ..models import ToDo, User
from .base import ToDoRepository, UserRepository

_TODO_SELECT = """
    SELECT t.id, t.title, t.created_at,
           u.id AS owner_id, u.email AS owner_email, u.full_name AS owner_full_name
    FROM todos t
    JOIN users u ON u.id = t.owner_id
"""


def _row_to_user(row: sqlite3.Row) -> User:
    return User(id=row["id"], email=row["email"], full_name=row["full_name"])


class SQLiteUserRepository(UserRepository):
    """Users stored in the ``users`` table."""

    def find_by_id(self, user_id: int) -> Optional[User]:
        with get_cursor() as cursor:
            row = cursor.execute(
                "SELECT id, email, full_name FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
        return _row_to_user(row) if row else None

    def upsert(self, user: User) -> User:
        """Insert or update a user.

        ``sqlite3.IntegrityError`` is raised (and not handled here) when
        the email is already taken by another user.
        """
        with get_cursor() as cursor:
            if user.id is None:
                cursor.execute(
                    "INSERT INTO users (email, full_name) VALUES (?, ?)",
                    (user.email, user.full_name),
                )
                user_id = cursor.lastrowid
            else:
                cursor.execute(
                    """
                    INSERT INTO users (id, email, full_name) VALUES (?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        email = excluded.email,
                        full_name = excluded.full_name
                    """,
                    (user.id, user.email, user.full_name),
                )
                user_id = user.id
            row = cursor.execute(
                "SELECT id, email, full_name FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
        return _row_to_user(row)

    def find_all(self) -> List[User]:
        with get_cursor() as cursor:
            rows = cursor.execute(
                "SELECT id, email, full_name FROM users ORDER BY id"
            ).fetchall()
        return [_row_to_user(row) for row in rows]


class SQLiteToDoRepository(ToDoRepository):
    """ToDos stored in ``todos`` with their collaborators in ``todo_collaborators``."""

    @staticmethod
    def _load_collaborators(
        cursor: sqlite3.Cursor, todo_ids: Iterable[int]
    ) -> Dict[int, Set[User]]:
        ids = list(todo_ids)
        collaborators: Dict[int, Set[User]] = {todo_id: set() for todo_id in ids}
        if not ids:
            return collaborators
        placeholders = ", ".join("?" for _ in ids)
        rows = cursor.execute(
            f"""
            SELECT c.todo_id, u.id, u.email, u.full_name
            FROM todo_collaborators c
            JOIN users u ON u.id = c.user_id
            WHERE c.todo_id IN ({placeholders})
            """,
            ids,
        ).fetchall()
        for row in rows:
            collaborators[row["todo_id"]].add(_row_to_user(row))
        return collaborators

    @classmethod
    def _rows_to_todos(cls, cursor: sqlite3.Cursor, rows: List[sqlite3.Row]) -> List[ToDo]:
        collaborators = cls._load_collaborators(cursor, (row["id"] for row in rows))
        return [
            ToDo(
                id=row["id"],
                title=row["title"],
                owner=User(
                    id=row["owner_id"],
                    email=row["owner_email"],
                    full_name=row["owner_full_name"],
                ),
                collaborators=collaborators[row["id"]],
                created_at=row["created_at"],
            )
            for row in rows
        ]

    @classmethod
    def _fetch(cls, cursor: sqlite3.Cursor, todo_id: int) -> Optional[ToDo]:
        rows = cursor.execute(_TODO_SELECT + " WHERE t.id = ?", (todo_id,)).fetchall()
        todos = cls._rows_to_todos(cursor, rows)
        return todos[0] if todos else None

    def upsert(self, todo: ToDo) -> ToDo:
        """Insert ``todo`` with its collaborators, or update its title.

        An existing row only has its title rewritten: the owner is fixed
        at creation and collaborator rows change through
        ``add_collaborator`` and ``remove_collaborator`` only, so a stale
        copy cannot overwrite memberships added in the meantime.
        """
        owner_id = todo.owner.id if todo.owner is not None else None
        with get_cursor() as cursor:
            exists = todo.id is not None and cursor.execute(
                "SELECT 1 FROM todos WHERE id = ?", (todo.id,)
            ).fetchone() is not None
            if exists:
                cursor.execute(
                    "UPDATE todos SET title = ? WHERE id = ?", (todo.title, todo.id)
                )
                return self._fetch(cursor, todo.id)

            cursor.execute(
                "INSERT INTO todos (id, title, owner_id) VALUES (?, ?, ?)",
                (todo.id, todo.title, owner_id),
            )
            todo_id = cursor.lastrowid if todo.id is None else todo.id
            cursor.executemany(
                "INSERT OR IGNORE INTO todo_collaborators (todo_id, user_id) VALUES (?, ?)",
                [(todo_id, user.id) for user in todo.collaborators],
            )
            return self._fetch(cursor, todo_id)

    def add_collaborator(self, todo: ToDo, user: User) -> None:
        with get_cursor() as cursor:
            cursor.execute(
                "INSERT OR IGNORE INTO todo_collaborators (todo_id, user_id) VALUES (?, ?)",
                (todo.id, user.id),
            )

    def remove_collaborator(self, todo: ToDo, user: User) -> None:
        with get_cursor() as cursor:
            cursor.execute(
                "DELETE FROM todo_collaborators WHERE todo_id = ? AND user_id = ?",
                (todo.id, user.id),
            )

    def find_by_id(self, todo_id: int) -> Optional[ToDo]:
        with get_cursor() as cursor:
            return self._fetch(cursor, todo_id)

    def delete(self, todo: ToDo) -> None:
        # Collaborator rows go with the todo through ON DELETE CASCADE.
        with get_cursor() as cursor:
            cursor.execute("DELETE FROM todos WHERE id = ?", (todo.id,))

    def find_all(self) -> List[ToDo]:
        with get_cursor() as cursor:
            rows = cursor.execute(_TODO_SELECT + " ORDER BY t.id").fetchall()
            return self._rows_to_todos(cursor, rows)

    def find_by_owner_id(self, owner_id: int) -> List[ToDo]:
        with get_cursor() as cursor:
            rows = cursor.execute(
                _TODO_SELECT + " WHERE t.owner_id = ? ORDER BY t.id", (owner_id,)
            ).fetchall()
            return self._rows_to_todos(cursor, rows)
