# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from notebox.shared.errors.base import DomainError


class EmailAlreadyInUseError(DomainError):
    code = "Email already in use"


class InvalidCredentialsError(DomainError):
    code = "Invalid credentials"
    status = HTTPStatus.UNAUTHORIZED


class NothingToUpdateError(DomainError):
    code = "Nothing to update"


class AuthenticationError(DomainError):
    code = "Please authenticate"
    status = HTTPStatus.UNAUTHORIZED


class MissingTokenError(AuthenticationError):
    details = "No token provided"


class TokenExpiredError(AuthenticationError):
    details = "Token expired"


class MalformedTokenError(AuthenticationError):
    details = "Invalid token format"


class UnknownUserError(AuthenticationError):
    details = "User not found"
