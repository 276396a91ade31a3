# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from notebox.domain.documents.entities import Document
from notebox.domain.documents.exceptions import DocumentNotFoundError
from notebox.domain.documents.repositories import DocumentRepository


class DeleteDocumentUseCase:
    def __init__(self, *, documents: DocumentRepository) -> None:
        self._documents = documents

    def execute(self, document_id: str, owner_id: str) -> Document:
        # A document owned by someone else is reported exactly like a missing one.
        deleted = self._documents.delete_owned(document_id, owner_id)
        if deleted is None:
            raise DocumentNotFoundError()
        return deleted
