# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from notebox.domain.users.entities import User
from notebox.domain.users.exceptions import InvalidCredentialsError
from notebox.domain.users.repositories import (
    PasswordHasher,
    SessionTokenService,
    UserRepository,
)


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> tuple[User, str]:
        user = self._users.find_by_email(email)
        # Unknown email and wrong password fail the same way.
        if user is None or not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id)
        return user, token
