# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from reviewhub.domain.users.entities import User
from reviewhub.domain.users.exceptions import UserAlreadyRegisteredError
from reviewhub.domain.users.repositories import (
    PasswordHasher,
    SessionTokenService,
    UserRepository,
)
from reviewhub.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> tuple[User, str]:
        if self._users.find_by_username(username) is not None:
            logger.info("auth.register: rejected, username taken")
            raise UserAlreadyRegisteredError()

        hashed = self._password_hasher.hash(password)
        # add() raises UserAlreadyRegisteredError if a concurrent insert won
        persisted = self._users.add(username, hashed)
        token = self._tokens.issue(persisted.username)
        logger.info(f"auth.register: ok user_id={persisted.id}")
        return persisted, token
