# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, cast

from flask import g, request

from notebox.application.use_cases.users.authenticate_request import (
    AuthContext,
    AuthenticateRequestUseCase,
)
from notebox.domain.users.entities import User
from notebox.shared.logging import logger


class AuthGuard:
    def __init__(self, *, authenticate_use_case: AuthenticateRequestUseCase) -> None:
        self._authenticate = authenticate_use_case

    def required(self, view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            try:
                context = self._authenticate.execute(request.headers.get("Authorization"))
            except Exception:
                logger.warning(f"Auth failed on {request.method} {request.path}")
                raise

            g.auth = context
            g.user_id = context.user.id
            logger.debug(f"Auth OK: user={context.user.id} {request.method} {request.path}")
            return view(*args, **kwargs)

        return inner


def current_auth() -> AuthContext:
    """Return the context attached by :meth:`AuthGuard.required`."""
    return cast(AuthContext, g.auth)


def current_user() -> User:
    return current_auth().user
