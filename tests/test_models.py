from __future__ import annotations

import dataclasses

import pytest

from user_directory.models import User


def test_factory_builds_user_with_all_fields() -> None:
    user = User.of(1, "Ivan", "123")

    assert user.id == 1
    assert user.name == "Ivan"
    assert user.password == "123"


def test_factory_accepts_missing_values() -> None:
    user = User.of(None, None, None)

    assert user == User(id=None, name=None, password=None)


def test_users_compare_by_every_field() -> None:
    assert User.of(1, "Ivan", "123") == User.of(1, "Ivan", "123")
    assert User.of(1, "Ivan", "123") != User.of(1, "Ivan", "1234")
    assert User.of(1, "Ivan", "123") != User.of(2, "Ivan", "123")
    assert hash(User.of(1, "Ivan", "123")) == hash(User.of(1, "Ivan", "123"))


def test_users_are_immutable() -> None:
    user = User.of(1, "Ivan", "123")

    with pytest.raises(dataclasses.FrozenInstanceError):
        user.name = "Lena"  # type: ignore[misc]
