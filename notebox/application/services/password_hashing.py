# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from notebox.domain.users.repositories import PasswordHasher

DEFAULT_HASH_METHOD = "scrypt"


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted one-way hashes; the salt and method are stored inside the hash."""

    def __init__(self, *, method: str = DEFAULT_HASH_METHOD, salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method, salt_length=self._salt_length)

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return check_password_hash(hashed, password)
        except ValueError:
            # Unsupported hash method.
            return False
