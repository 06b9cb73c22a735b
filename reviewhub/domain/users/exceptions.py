# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from reviewhub.shared.errors.base import DomainError, ErrorKind, InfrastructureError


class UserAlreadyRegisteredError(DomainError):
    code = ErrorKind.USER_ALREADY_REGISTERED.value
    status = HTTPStatus.CONFLICT


class UserNotRegisteredError(DomainError):
    code = ErrorKind.USER_NOT_REGISTERED.value
    status = HTTPStatus.CONFLICT


class WrongPasswordError(DomainError):
    code = ErrorKind.WRONG_PASSWORD.value
    status = HTTPStatus.UNAUTHORIZED


class SessionError(DomainError):
    status = HTTPStatus.UNAUTHORIZED


class ExpiredSessionError(SessionError):
    code = ErrorKind.EXPIRED_SESSION.value


class InvalidSessionError(SessionError):
    code = ErrorKind.INVALID_SESSION.value


class CorruptPasswordHashError(InfrastructureError):
    """A stored hash could not be parsed. Storage integrity, not user input."""

    def __init__(self) -> None:
        super().__init__(code="password_hash_corrupt")
