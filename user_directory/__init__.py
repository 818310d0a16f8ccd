"""Core utilities for the in-memory user directory."""

from __future__ import annotations

from .config import DirectoryConfig, create_user_service, load_config, resolve_config_path
from .dao import SqliteUserDao, UserDao, resolve_database_path
from .models import User
from .service import DuplicateIdPolicy, DuplicateUserIdError, UserService

__all__ = [
    "DirectoryConfig",
    "DuplicateIdPolicy",
    "DuplicateUserIdError",
    "SqliteUserDao",
    "User",
    "UserDao",
    "UserService",
    "create_user_service",
    "load_config",
    "resolve_config_path",
    "resolve_database_path",
]
