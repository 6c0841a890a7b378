"""
SQLite database integration, migrations and transaction scoping.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager used by the
repositories (``get_cursor``), an explicit transaction scope
(``transaction``) and the migration runner applied on application
start (``init_db``).

Migration versions are recorded in the ``migrations`` table and new
migrations are executed in order.
"""

import logging
import os
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings

logger = logging.getLogger(__name__)

# Connection owned by the transaction open on the current thread, if any.
_local = threading.local()


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            email TEXT NOT NULL UNIQUE,
            full_name TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS todos (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            owner_id INTEGER NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(owner_id) REFERENCES users(id)
        );

        -- Collaborators of a todo.  The composite key keeps membership a set.
        CREATE TABLE IF NOT EXISTS todo_collaborators (
            todo_id INTEGER NOT NULL,
            user_id INTEGER NOT NULL,
            PRIMARY KEY (todo_id, user_id),
            FOREIGN KEY(todo_id) REFERENCES todos(id) ON DELETE CASCADE,
            FOREIGN KEY(user_id) REFERENCES users(id)
        );
        """,
    ),
    # Migration 2: indices on foreign keys used by lookups
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_todos_owner_id ON todos(owner_id);
        CREATE INDEX IF NOT EXISTS idx_todo_collaborators_user_id ON todo_collaborators(user_id);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Foreign key enforcement is switched on per connection since
    SQLite leaves it off by default; the collaborator cascade relies
    on it.
    """
    conn = sqlite3.connect(get_database_path(), timeout=settings.db_timeout)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def _active_connection() -> Optional[sqlite3.Connection]:
    return getattr(_local, "connection", None)


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor, joining the current thread's transaction if one is open.

    Outside a transaction a fresh connection is opened, committed when
    the block exits normally and closed in every case.  Inside
    ``transaction()`` the shared connection is used and commit or
    rollback is left to the transaction.
    """
    active = _active_connection()
    if active is not None:
        yield active.cursor()
        return

    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


@contextmanager
def transaction() -> Iterator[sqlite3.Connection]:
    """Run a block atomically against the database.

    ``BEGIN IMMEDIATE`` takes SQLite's write lock up front, so two
    threads (or processes) running a lookup-then-write sequence on the
    same rows are serialized instead of interleaving.  Repository calls
    made inside the block reuse the connection through ``get_cursor``.
    The transaction commits when the block exits normally, rolls back
    on any exception and the connection is always closed.  A nested
    ``transaction()`` joins the outer one.
    """
    active = _active_connection()
    if active is not None:
        yield active
        return

    conn = get_connection()
    # Autocommit mode: BEGIN/COMMIT are issued explicitly below.
    conn.isolation_level = None
    try:
        conn.execute("BEGIN IMMEDIATE")
        _local.connection = conn
        try:
            yield conn
        except BaseException:
            conn.execute("ROLLBACK")
            raise
        conn.execute("COMMIT")
    finally:
        _local.connection = None
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version and applies every newer entry of
    ``MIGRATIONS``.  To change the schema, append a migration with an
    incremented version number.
    """
    db_path = get_database_path()
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
                logger.info("Applied migration %s to %s", version, db_path)
