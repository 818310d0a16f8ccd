"""Data-access collaborators the directory service delegates persistence to."""
from __future__ import annotations

import abc
import logging
import sqlite3
from pathlib import Path
from typing import List, Optional

from .models import User

logger = logging.getLogger("userdirectory.dao")


def _ensure_directory(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def resolve_database_path(env_value: Optional[str]) -> Path:
    """Resolve the on-disk path for the user database."""

    if env_value:
        return Path(env_value).expanduser().resolve(strict=False)
    base_dir = Path(__file__).resolve().parent.parent / "data"
    return (base_dir / "users.sqlite3").resolve(strict=False)


class UserDao(abc.ABC):
    """Persistence capability used by :class:`~user_directory.service.UserService`."""

    @abc.abstractmethod
    def delete(self, user_id: int) -> bool:
        """Remove the user with ``user_id`` and report whether anything was removed."""


class SqliteUserDao(UserDao):
    """Simple wrapper around SQLite for persisting users."""

    def __init__(self, path: Path) -> None:
        _ensure_directory(path)
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._path)
        conn.row_factory = sqlite3.Row
        return conn

    def initialize(self) -> None:
        """Create the users table if it does not already exist."""

        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS users (
                    id INTEGER PRIMARY KEY,
                    name TEXT,
                    password TEXT
                )
                """
            )
        logger.debug("User table ready at %s", self._path)

    def save(self, user: User) -> User:
        if user.id is None:
            raise ValueError("User id must not be empty")

        with self._connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO users (id, name, password) VALUES (?, ?, ?)",
                (user.id, user.name, user.password),
            )
        return user

    def get(self, user_id: int) -> Optional[User]:
        with self._connect() as conn:
            row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        if row is None:
            return None
        return self._row_to_user(row)

    def list_users(self) -> List[User]:
        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM users ORDER BY id").fetchall()
        return [self._row_to_user(row) for row in rows]

    def delete(self, user_id: int) -> bool:
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
        deleted = cursor.rowcount > 0
        logger.debug("Delete of user %s removed a row: %s", user_id, deleted)
        return deleted

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(id=row["id"], name=row["name"], password=row["password"])


__all__ = ["UserDao", "SqliteUserDao", "resolve_database_path"]
