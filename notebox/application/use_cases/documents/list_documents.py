# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from notebox.domain.documents.entities import Document
from notebox.domain.documents.repositories import DocumentRepository


class ListDocumentsUseCase:
    def __init__(self, *, documents: DocumentRepository) -> None:
        self._documents = documents

    def execute(self, owner_id: str) -> list[Document]:
        return self._documents.list_for_owner(owner_id)
