# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless signed session tokens.

Tokens are HS256 JWTs carrying the user id in ``sub`` and an absolute ``exp``.
Nothing is persisted, so a token stays valid until it expires even after the
user logs out.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from notebox.domain.users.entities import TokenClaims
from notebox.domain.users.exceptions import (
    MalformedTokenError,
    MissingTokenError,
    TokenExpiredError,
)
from notebox.domain.users.repositories import SessionTokenService
from notebox.shared.logging import logger

DEFAULT_TOKEN_TTL = timedelta(days=7)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtSessionTokenService(SessionTokenService):
    def __init__(
        self,
        *,
        secret: str,
        ttl: timedelta = DEFAULT_TOKEN_TTL,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm
        self._clock = clock

    def issue(self, subject_id: str) -> str:
        issued_at = self._clock()
        expires_at = issued_at + self._ttl
        payload = {"sub": subject_id, "iat": issued_at, "exp": expires_at}
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        logger.debug(f"tokens.issue: user={subject_id} exp={expires_at.isoformat()}")
        return token

    def verify(self, token: str | None) -> TokenClaims:
        if not token:
            raise MissingTokenError()

        # Time claims are checked against the service clock, not jwt's wall clock.
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "require": ["sub", "iat", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as exc:
            logger.debug(f"tokens.verify: rejected ({type(exc).__name__})")
            raise MalformedTokenError() from exc

        subject_id = payload["sub"]
        if not isinstance(subject_id, str) or not subject_id:
            raise MalformedTokenError()

        try:
            issued_at = datetime.fromtimestamp(payload["iat"], UTC)
            expires_at = datetime.fromtimestamp(payload["exp"], UTC)
        except (TypeError, ValueError, OverflowError, OSError) as exc:
            raise MalformedTokenError() from exc

        if self._clock() >= expires_at:
            raise TokenExpiredError()

        return TokenClaims(
            subject_id=subject_id,
            issued_at=issued_at,
            expires_at=expires_at,
        )
