# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Document


class DocumentRepository(Protocol):
    def add(self, document: Document) -> Document: ...

    def list_for_owner(self, owner_id: str) -> list[Document]:
        """Return the owner's documents, most recently updated first."""
        ...

    def delete_owned(self, document_id: str, owner_id: str) -> Document | None:
        """Delete the document only if ``owner_id`` owns it."""
        ...
