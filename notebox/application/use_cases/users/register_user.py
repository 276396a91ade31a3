# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from notebox.domain.users.entities import User
from notebox.domain.users.exceptions import EmailAlreadyInUseError
from notebox.domain.users.repositories import (
    PasswordHasher,
    SessionTokenService,
    UserRepository,
)


class RegisterUserUseCase:
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

    def execute(self, name: str, email: str, password: str) -> tuple[User, str]:
        existing = self._users.find_by_email(email)
        if existing:
            raise EmailAlreadyInUseError()
        now = datetime.now(UTC)
        user = User(
            id=uuid.uuid4().hex,
            name=name,
            email=email,
            password_hash=self._password_hasher.hash(password),
            theme=False,
            created_at=now,
            updated_at=now,
        )
        persisted = self._users.add(user)
        token = self._tokens.issue(persisted.id)
        return persisted, token
