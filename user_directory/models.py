"""Domain models for the user directory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    """Represents a user account held by the directory."""

    id: Optional[int]
    name: Optional[str]
    password: Optional[str]

    @classmethod
    def of(cls, id: Optional[int], name: Optional[str], password: Optional[str]) -> "User":
        """Build a :class:`User` without validating any of the fields."""

        return cls(id=id, name=name, password=password)


__all__ = ["User"]
