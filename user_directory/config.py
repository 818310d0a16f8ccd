"""Configuration management for the user directory."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

import yaml

from .dao import SqliteUserDao
from .service import DuplicateIdPolicy, UserService


@dataclass(frozen=True)
class DirectoryConfig:
    """Settings used to wire a :class:`UserService`."""

    duplicate_id_policy: DuplicateIdPolicy = DuplicateIdPolicy.FAIL
    database_path: Optional[Path] = None

    @staticmethod
    def from_dict(data: Dict[str, object], base_path: Path | None = None) -> "DirectoryConfig":
        """Create a :class:`DirectoryConfig` from raw dictionary data."""
        unknown = set(data.keys()) - {"duplicate_id_policy", "database_path"}
        if unknown:
            raise ValueError(f"Unknown directory configuration fields: {', '.join(sorted(unknown))}")

        raw_policy = data.get("duplicate_id_policy", DuplicateIdPolicy.FAIL.value)
        try:
            policy = DuplicateIdPolicy(raw_policy)
        except ValueError as exc:
            allowed = ", ".join(member.value for member in DuplicateIdPolicy)
            raise ValueError(
                f"Invalid duplicate_id_policy '{raw_policy}'; expected one of: {allowed}"
            ) from exc

        raw_database = data.get("database_path")
        if raw_database:
            raw_path = Path(str(raw_database))
            if raw_path.is_absolute():
                database_path = raw_path.expanduser().resolve(strict=False)
            else:
                expanded = raw_path.expanduser()
                if base_path is not None:
                    database_path = (base_path / expanded).resolve(strict=False)
                else:
                    database_path = expanded.resolve(strict=False)
        else:
            database_path = None

        return DirectoryConfig(duplicate_id_policy=policy, database_path=database_path)


def load_config(config_path: Path) -> DirectoryConfig:
    """Load directory settings from a YAML file."""
    with config_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}

    if not isinstance(raw, dict):
        raise ValueError("Configuration file must contain a mapping at the top level")

    return DirectoryConfig.from_dict(raw, base_path=config_path.parent)


def resolve_config_path(env_value: Optional[str]) -> Path:
    """Resolve the path to the configuration file."""
    if env_value:
        candidate = Path(env_value).expanduser().resolve(strict=False)
    else:
        candidate = (Path(__file__).resolve().parent.parent / "config" / "directory.yaml").resolve(strict=False)
    return candidate


def create_user_service(config: DirectoryConfig) -> UserService:
    """Build a :class:`UserService` wired according to ``config``."""

    user_dao = None
    if config.database_path is not None:
        user_dao = SqliteUserDao(config.database_path)
        user_dao.initialize()
    return UserService(user_dao, duplicate_id_policy=config.duplicate_id_policy)


__all__ = [
    "DirectoryConfig",
    "create_user_service",
    "load_config",
    "resolve_config_path",
]
