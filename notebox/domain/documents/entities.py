# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Document:

    id: str
    title: str
    content: str
    owner_id: str
    created_at: datetime
    updated_at: datetime
