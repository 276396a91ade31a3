# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from notebox.application.use_cases.documents.create_document import \
    CreateDocumentUseCase
from notebox.application.use_cases.documents.delete_document import \
    DeleteDocumentUseCase
from notebox.application.use_cases.documents.list_documents import \
    ListDocumentsUseCase
from notebox.interfaces.http.auth_guard import AuthGuard, current_user
from notebox.interfaces.http.dto.auth import MessageDTO
from notebox.interfaces.http.dto.documents import (CreateDocumentRequestDTO,
                                                   DocumentDTO)
from notebox.shared.errors.validation import raise_validation_error
from notebox.shared.logging import logger


class DocumentsController:
    def __init__(
        self,
        *,
        create_use_case: CreateDocumentUseCase,
        list_use_case: ListDocumentsUseCase,
        delete_use_case: DeleteDocumentUseCase,
        guard: AuthGuard,
    ) -> None:
        self._create_use_case = create_use_case
        self._list_use_case = list_use_case
        self._delete_use_case = delete_use_case
        self._guard = guard

    def create_document(self) -> tuple[Response, int]:
        try:
            dto = CreateDocumentRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc, "Title and content are required")

        owner = current_user()
        document = self._create_use_case.execute(owner.id, dto.title, dto.content)
        logger.info(f"documents.create: ok id={document.id} owner={owner.id}")
        return jsonify(DocumentDTO.from_entity(document).model_dump(mode="json", by_alias=True)), 201

    def list_documents(self) -> tuple[Response, int]:
        documents = self._list_use_case.execute(current_user().id)
        payload = [
            DocumentDTO.from_entity(document).model_dump(mode="json", by_alias=True)
            for document in documents
        ]
        return jsonify(payload), 200

    def delete_document(self, document_id: str) -> tuple[Response, int]:
        owner = current_user()
        self._delete_use_case.execute(document_id, owner.id)
        logger.info(f"documents.delete: ok id={document_id} owner={owner.id}")
        return jsonify(MessageDTO(message="File deleted successfully").model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("documents", __name__, url_prefix="/api")
        bp.add_url_rule(
            "/files",
            view_func=self._guard.required(self.create_document),
            methods=["POST"],
            endpoint="documents_create",
        )
        bp.add_url_rule(
            "/files",
            view_func=self._guard.required(self.list_documents),
            methods=["GET"],
            endpoint="documents_list",
        )
        bp.add_url_rule(
            "/files/<string:document_id>",
            view_func=self._guard.required(self.delete_document),
            methods=["DELETE"],
            endpoint="documents_delete",
        )
        return bp
