# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .documents.entities import Document
from .documents.exceptions import DocumentNotFoundError
from .users.entities import TokenClaims, User
from .users.exceptions import (
    AuthenticationError,
    EmailAlreadyInUseError,
    InvalidCredentialsError,
    MalformedTokenError,
    MissingTokenError,
    NothingToUpdateError,
    TokenExpiredError,
    UnknownUserError,
)

__all__ = [
    "AuthenticationError",
    "Document",
    "DocumentNotFoundError",
    "EmailAlreadyInUseError",
    "InvalidCredentialsError",
    "MalformedTokenError",
    "MissingTokenError",
    "NothingToUpdateError",
    "TokenClaims",
    "TokenExpiredError",
    "UnknownUserError",
    "User",
]
