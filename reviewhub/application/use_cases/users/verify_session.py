# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case turning a bearer token into the acting identity."""

from __future__ import annotations

from reviewhub.domain.users.entities import AuthenticatedIdentity
from reviewhub.domain.users.exceptions import InvalidSessionError
from reviewhub.domain.users.repositories import SessionTokenService, UserRepository
from reviewhub.shared.logging import logger


class VerifySessionUseCase:
    def __init__(self, *, users: UserRepository, tokens: SessionTokenService) -> None:
        self._users = users
        self._tokens = tokens

    def execute(self, token: str) -> AuthenticatedIdentity:
        # ExpiredSessionError / InvalidSessionError propagate unchanged
        claims = self._tokens.verify(token)

        user = self._users.find_by_username(claims.username)
        if user is None:
            logger.warning("auth.session: token names a user that no longer exists")
            raise InvalidSessionError()

        return AuthenticatedIdentity(id=user.id, username=user.username)
