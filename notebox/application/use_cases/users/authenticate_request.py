# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Resolve the caller of a protected route from its Authorization header."""

from __future__ import annotations

from dataclasses import dataclass

from notebox.domain.users.entities import User
from notebox.domain.users.exceptions import MissingTokenError, UnknownUserError
from notebox.domain.users.repositories import SessionTokenService, UserRepository

BEARER_PREFIX = "Bearer "


@dataclass(slots=True, frozen=True)
class AuthContext:
    user: User
    token: str


def extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX):].strip() or None


class AuthenticateRequestUseCase:
    def __init__(self, *, users: UserRepository, tokens: SessionTokenService) -> None:
        self._users = users
        self._tokens = tokens

    def execute(self, authorization: str | None) -> AuthContext:
        token = extract_bearer_token(authorization)
        if token is None:
            raise MissingTokenError()

        claims = self._tokens.verify(token)

        user = self._users.find_by_id(claims.subject_id)
        if user is None:
            raise UnknownUserError()

        return AuthContext(user=user, token=token)
