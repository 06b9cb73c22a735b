# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from reviewhub.domain.users.entities import User as DomainUser
from reviewhub.domain.users.exceptions import UserAlreadyRegisteredError
from reviewhub.domain.users.repositories import UserRepository
from reviewhub.infrastructure.db.models import User
from reviewhub.infrastructure.unit_of_work import unit_of_work_scope
from reviewhub.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            # exact, case-sensitive comparison
            row = session.scalars(select(User).where(User.username == username)).first()
            return _to_domain(row) if row else None

    def add(self, username: str, password_hash: str) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(username=username, password_hash=password_hash)
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            # lost the race against a concurrent registration
            logger.info("users.add: unique constraint on username fired")
            raise UserAlreadyRegisteredError() from exc
