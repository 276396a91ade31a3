# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from notebox.domain.users.entities import User as DomainUser
from notebox.domain.users.exceptions import EmailAlreadyInUseError, UnknownUserError
from notebox.domain.users.repositories import UserRepository
from notebox.infrastructure.db.models import User
from notebox.infrastructure.db.session import SessionFactory, session_scope
from notebox.infrastructure.repositories._timestamps import as_utc


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
        theme=row.theme,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with session_scope(self._session_factory) as session:
            row = session.query(User).filter(User.email == email).first()
            if not row:
                return None
            return _to_domain(row)

    def find_by_id(self, user_id: str) -> DomainUser | None:
        with session_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            if not row:
                return None
            return _to_domain(row)

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope(self._session_factory) as session:
                row = User(
                    id=user.id,
                    name=user.name,
                    email=user.email,
                    password_hash=user.password_hash,
                    theme=user.theme,
                    created_at=user.created_at,
                    updated_at=user.updated_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            # Lost a race against a concurrent registration with the same email.
            raise EmailAlreadyInUseError() from exc

    def update(self, user: DomainUser) -> DomainUser:
        with session_scope(self._session_factory) as session:
            row = session.get(User, user.id)
            if not row:
                raise UnknownUserError()
            row.name = user.name
            row.theme = user.theme
            row.password_hash = user.password_hash
            row.updated_at = user.updated_at
            session.flush()
            session.refresh(row)
            return _to_domain(row)
