# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from notebox.domain.documents.entities import Document as DomainDocument
from notebox.domain.documents.repositories import DocumentRepository
from notebox.infrastructure.db.models import Document
from notebox.infrastructure.db.session import SessionFactory, session_scope
from notebox.infrastructure.repositories._timestamps import as_utc


def _to_domain(row: Document) -> DomainDocument:
    return DomainDocument(
        id=row.id,
        title=row.title,
        content=row.content,
        owner_id=row.owner_id,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlAlchemyDocumentRepository(DocumentRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def add(self, document: DomainDocument) -> DomainDocument:
        with session_scope(self._session_factory) as session:
            row = Document(
                id=document.id,
                title=document.title,
                content=document.content,
                owner_id=document.owner_id,
                created_at=document.created_at,
                updated_at=document.updated_at,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def list_for_owner(self, owner_id: str) -> list[DomainDocument]:
        with session_scope(self._session_factory) as session:
            rows = (
                session.query(Document)
                .filter(Document.owner_id == owner_id)
                .order_by(Document.updated_at.desc(), Document.created_at.desc())
                .all()
            )
            return [_to_domain(row) for row in rows]

    def delete_owned(self, document_id: str, owner_id: str) -> DomainDocument | None:
        with session_scope(self._session_factory) as session:
            row = (
                session.query(Document)
                .filter(Document.id == document_id, Document.owner_id == owner_id)
                .first()
            )
            if not row:
                return None
            deleted = _to_domain(row)
            session.delete(row)
            return deleted
