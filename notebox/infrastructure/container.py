# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property, partial

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from notebox.application.services.password_hashing import \
    WerkzeugPasswordHasher
from notebox.application.services.session_tokens import JwtSessionTokenService
from notebox.application.use_cases.documents.create_document import \
    CreateDocumentUseCase
from notebox.application.use_cases.documents.delete_document import \
    DeleteDocumentUseCase
from notebox.application.use_cases.documents.list_documents import \
    ListDocumentsUseCase
from notebox.application.use_cases.users.authenticate_request import \
    AuthenticateRequestUseCase
from notebox.application.use_cases.users.login_user import LoginUserUseCase
from notebox.application.use_cases.users.register_user import \
    RegisterUserUseCase
from notebox.application.use_cases.users.update_profile import \
    UpdateProfileUseCase
from notebox.infrastructure.db import (check_database, create_db_engine,
                                       create_session_factory)
from notebox.infrastructure.repositories.documents.sqlalchemy_document_repository import \
    SqlAlchemyDocumentRepository
from notebox.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from notebox.interfaces.http.auth_guard import AuthGuard
from notebox.interfaces.http.controllers.auth_controller import AuthController
from notebox.interfaces.http.controllers.documents_controller import \
    DocumentsController
from notebox.interfaces.http.controllers.misc_controller import MiscController
from notebox.interfaces.http.controllers.users_controller import \
    UsersController
from notebox.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def engine(self) -> Engine:
        return create_db_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return create_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> JwtSessionTokenService:
        return JwtSessionTokenService(
            secret=self.config.jwt_secret,
            ttl=timedelta(days=self.config.jwt_ttl_days),
            algorithm=self.config.jwt_algorithm,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def document_repository(self) -> SqlAlchemyDocumentRepository:
        return SqlAlchemyDocumentRepository(self.session_factory)

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def authenticate_request_use_case(self) -> AuthenticateRequestUseCase:
        return AuthenticateRequestUseCase(
            users=self.user_repository,
            tokens=self.token_service,
        )

    @cached_property
    def update_profile_use_case(self) -> UpdateProfileUseCase:
        return UpdateProfileUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def create_document_use_case(self) -> CreateDocumentUseCase:
        return CreateDocumentUseCase(documents=self.document_repository)

    @cached_property
    def list_documents_use_case(self) -> ListDocumentsUseCase:
        return ListDocumentsUseCase(documents=self.document_repository)

    @cached_property
    def delete_document_use_case(self) -> DeleteDocumentUseCase:
        return DeleteDocumentUseCase(documents=self.document_repository)

    # HTTP

    @cached_property
    def auth_guard(self) -> AuthGuard:
        return AuthGuard(authenticate_use_case=self.authenticate_request_use_case)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            guard=self.auth_guard,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            update_profile_use_case=self.update_profile_use_case,
            guard=self.auth_guard,
        )

    @cached_property
    def documents_controller(self) -> DocumentsController:
        return DocumentsController(
            create_use_case=self.create_document_use_case,
            list_use_case=self.list_documents_use_case,
            delete_use_case=self.delete_document_use_case,
            guard=self.auth_guard,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(check_database=partial(check_database, self.engine))
