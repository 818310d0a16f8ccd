"""In-memory user directory backed by an injected DAO for deletions."""

from __future__ import annotations

import enum
import logging
from typing import Dict, List, Optional

from .dao import UserDao
from .models import User

logger = logging.getLogger("userdirectory.service")

NULL_CREDENTIALS_MESSAGE = "Username or password is null!"


class DuplicateIdPolicy(str, enum.Enum):
    """How :meth:`UserService.get_all_converted_by_id` treats repeated ids."""

    FAIL = "fail"
    LAST_WRITE_WINS = "last-write-wins"


class DuplicateUserIdError(ValueError):
    """Raised when two stored users share an id during conversion."""

    def __init__(self, user_id: Optional[int]) -> None:
        super().__init__(f"Duplicate user id {user_id!r}")
        self.user_id = user_id


class UserService:
    """Keep users in insertion order and answer lookups against them.

    The directory accepts repeated ids on :meth:`add`; the configured
    :class:`DuplicateIdPolicy` only applies when the users are converted into a
    mapping keyed by id. Deletion is delegated to ``user_dao`` and leaves the
    in-memory sequence untouched.
    """

    def __init__(
        self,
        user_dao: Optional[UserDao] = None,
        *,
        duplicate_id_policy: DuplicateIdPolicy = DuplicateIdPolicy.FAIL,
    ) -> None:
        self._user_dao = user_dao
        self._duplicate_id_policy = DuplicateIdPolicy(duplicate_id_policy)
        self._users: List[User] = []

    @property
    def duplicate_id_policy(self) -> DuplicateIdPolicy:
        return self._duplicate_id_policy

    def find_all(self) -> List[User]:
        """Return a copy of every stored user in insertion order."""

        return list(self._users)

    def add(self, *users: User) -> bool:
        self._users.extend(users)
        logger.debug("Added %d user(s); directory now holds %d", len(users), len(self._users))
        return True

    def login(self, name: Optional[str], password: Optional[str]) -> Optional[User]:
        """Return the first user matching ``name`` and ``password`` exactly."""

        if name is None or password is None:
            raise ValueError(NULL_CREDENTIALS_MESSAGE)

        for user in self._users:
            if user.name == name and user.password == password:
                return user

        logger.debug("No user matched the supplied credentials for %r", name)
        return None

    def get_all_converted_by_id(self) -> Dict[Optional[int], User]:
        converted: Dict[Optional[int], User] = {}
        for user in self._users:
            if user.id in converted:
                logger.warning(
                    "User id %r appears more than once (policy: %s)",
                    user.id,
                    self._duplicate_id_policy.value,
                )
                if self._duplicate_id_policy is DuplicateIdPolicy.FAIL:
                    raise DuplicateUserIdError(user.id)
            converted[user.id] = user
        return converted

    def delete(self, user_id: int) -> bool:
        if self._user_dao is None:
            raise RuntimeError("No user DAO configured for deletions")

        result = self._user_dao.delete(user_id)
        logger.debug("User DAO delete for id %s returned %s", user_id, result)
        return result


__all__ = [
    "DuplicateIdPolicy",
    "DuplicateUserIdError",
    "NULL_CREDENTIALS_MESSAGE",
    "UserService",
]
