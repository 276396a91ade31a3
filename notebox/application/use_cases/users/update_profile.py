# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime

from notebox.domain.users.entities import User
from notebox.domain.users.exceptions import NothingToUpdateError, UnknownUserError
from notebox.domain.users.repositories import PasswordHasher, UserRepository


class UpdateProfileUseCase:
    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(
        self,
        user_id: str,
        *,
        name: str | None = None,
        theme: bool | None = None,
        password: str | None = None,
    ) -> User:
        if name is None and theme is None and password is None:
            raise NothingToUpdateError()

        user = self._users.find_by_id(user_id)
        if user is None:
            raise UnknownUserError()

        changes: dict[str, object] = {"updated_at": datetime.now(UTC)}
        if name is not None:
            changes["name"] = name
        if theme is not None:
            changes["theme"] = theme
        # The stored hash is only replaced when a new password is supplied.
        if password is not None:
            changes["password_hash"] = self._password_hasher.hash(password)

        return self._users.update(replace(user, **changes))
