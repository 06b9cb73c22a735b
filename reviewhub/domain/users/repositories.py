# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import SessionClaims, User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...

    def add(self, username: str, password_hash: str) -> User:
        """Persist a new user.

        Raises UserAlreadyRegisteredError when the username is taken, including
        when the uniqueness constraint fires after a concurrent insert.
        """
        ...


class SessionTokenService(Protocol):
    def issue(self, username: str) -> str: ...
    def verify(self, token: str) -> SessionClaims: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
