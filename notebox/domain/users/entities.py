# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: str
    name: str
    email: str
    password_hash: str
    theme: bool
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class TokenClaims:

    subject_id: str
    issued_at: datetime
    expires_at: datetime
