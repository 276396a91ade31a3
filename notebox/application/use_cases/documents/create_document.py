# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from notebox.domain.documents.entities import Document
from notebox.domain.documents.repositories import DocumentRepository


class CreateDocumentUseCase:
    def __init__(self, *, documents: DocumentRepository) -> None:
        self._documents = documents

    def execute(self, owner_id: str, title: str, content: str) -> Document:
        now = datetime.now(UTC)
        document = Document(
            id=uuid.uuid4().hex,
            title=title,
            content=content,
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
        )
        return self._documents.add(document)
