# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.documents.create_document import CreateDocumentUseCase
from .use_cases.documents.delete_document import DeleteDocumentUseCase
from .use_cases.documents.list_documents import ListDocumentsUseCase
from .use_cases.users.authenticate_request import AuthContext, AuthenticateRequestUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase
from .use_cases.users.update_profile import UpdateProfileUseCase

__all__ = [
    "AuthContext",
    "AuthenticateRequestUseCase",
    "CreateDocumentUseCase",
    "DeleteDocumentUseCase",
    "ListDocumentsUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "UpdateProfileUseCase",
]
