# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from http import HTTPStatus
from typing import Any, cast


class ErrorKind(StrEnum):
    """Closed set of failure kinds callers can match on."""

    USER_ALREADY_REGISTERED = "user_already_registered"
    USER_NOT_REGISTERED = "user_not_registered"
    WRONG_PASSWORD = "wrong_password"
    EXPIRED_SESSION = "expired_session"
    INVALID_SESSION = "invalid_session"
    NOT_OWNER = "not_owner"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    @property
    def kind(self) -> ErrorKind:
        try:
            return ErrorKind(self.code)
        except ValueError:
            return _KIND_BY_STATUS.get(self.status, ErrorKind.INTERNAL)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


_KIND_BY_STATUS: dict[HTTPStatus, ErrorKind] = {
    HTTPStatus.NOT_FOUND: ErrorKind.NOT_FOUND,
    HTTPStatus.CONFLICT: ErrorKind.CONFLICT,
    HTTPStatus.UNPROCESSABLE_ENTITY: ErrorKind.VALIDATION,
}


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        super().__init__(code=resolved_code, status=resolved_status, context=context)


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(code=code, status=resolved_status, context=context)

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.INTERNAL


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            context=context,
        )

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.VALIDATION
