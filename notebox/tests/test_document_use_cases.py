from __future__ import annotations

from datetime import timedelta

import pytest
from fakes import InMemoryDocumentRepository

from notebox.application.use_cases.documents.create_document import CreateDocumentUseCase
from notebox.application.use_cases.documents.delete_document import DeleteDocumentUseCase
from notebox.application.use_cases.documents.list_documents import ListDocumentsUseCase
from notebox.domain.documents.exceptions import DocumentNotFoundError


@pytest.fixture()
def documents() -> InMemoryDocumentRepository:
    return InMemoryDocumentRepository()


def test_create_document_sets_owner_and_timestamps(documents: InMemoryDocumentRepository) -> None:
    create = CreateDocumentUseCase(documents=documents)

    document = create.execute("alice", "Groceries", "milk, eggs")

    assert document.owner_id == "alice"
    assert document.title == "Groceries"
    assert document.created_at == document.updated_at
    assert documents.documents[document.id] == document


def test_list_documents_most_recent_first(documents: InMemoryDocumentRepository) -> None:
    create = CreateDocumentUseCase(documents=documents)
    older = create.execute("alice", "first", "a")
    newer = create.execute("alice", "second", "b")
    documents.backdate(older.id, timedelta(minutes=5))

    listed = ListDocumentsUseCase(documents=documents).execute("alice")

    assert [d.id for d in listed] == [newer.id, older.id]


def test_list_documents_is_owner_scoped(documents: InMemoryDocumentRepository) -> None:
    create = CreateDocumentUseCase(documents=documents)
    create.execute("alice", "mine", "a")
    create.execute("bob", "his", "b")

    listed = ListDocumentsUseCase(documents=documents).execute("alice")

    assert [d.title for d in listed] == ["mine"]


def test_delete_document_owned(documents: InMemoryDocumentRepository) -> None:
    document = CreateDocumentUseCase(documents=documents).execute("alice", "t", "c")

    deleted = DeleteDocumentUseCase(documents=documents).execute(document.id, "alice")

    assert deleted.id == document.id
    assert documents.documents == {}


def test_delete_document_of_another_owner_is_not_found(
    documents: InMemoryDocumentRepository,
) -> None:
    document = CreateDocumentUseCase(documents=documents).execute("alice", "t", "c")
    delete = DeleteDocumentUseCase(documents=documents)

    with pytest.raises(DocumentNotFoundError) as foreign:
        delete.execute(document.id, "bob")
    with pytest.raises(DocumentNotFoundError) as missing:
        delete.execute("does-not-exist", "bob")

    assert foreign.value.to_dict() == missing.value.to_dict() == {"error": "File not found"}
    assert foreign.value.status == 404
    assert document.id in documents.documents
