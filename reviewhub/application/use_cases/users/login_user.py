# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from reviewhub.domain.users.exceptions import UserNotRegisteredError, WrongPasswordError
from reviewhub.domain.users.repositories import (
    PasswordHasher,
    SessionTokenService,
    UserRepository,
)
from reviewhub.shared.logging import logger


class LoginUserUseCase:
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

    def execute(self, username: str, password: str) -> str:
        user = self._users.find_by_username(username)
        if user is None:
            logger.info("auth.login: failed reason=user_not_registered")
            raise UserNotRegisteredError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info(f"auth.login: failed reason=wrong_password user_id={user.id}")
            raise WrongPasswordError()

        logger.info(f"auth.login: ok user_id={user.id}")
        return self._tokens.issue(user.username)
