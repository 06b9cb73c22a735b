# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Security audit trail.

Every event goes to the log first and is then stored in ``audit_logs``.
A failed store is reported as a warning; the request that produced the
event is unaffected.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from reviewhub.infrastructure.db.models import AuditLog
from reviewhub.infrastructure.unit_of_work import SqlAlchemyUnitOfWork
from reviewhub.shared.logging import logger


class AuditAction(str, Enum):
    REGISTER = "register"
    REGISTER_FAILED = "register_failed"
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"

    OWNERSHIP_DENIED = "ownership_denied"

    RESTAURANT_CREATED = "restaurant_created"
    RESTAURANT_UPDATED = "restaurant_updated"
    RESTAURANT_DELETED = "restaurant_deleted"
    REVIEW_CREATED = "review_created"
    REVIEW_UPDATED = "review_updated"
    REVIEW_DELETED = "review_deleted"


_REDACTED_KEYS = ("password", "token", "hash", "secret", "authorization")


def _redact(details: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: "***REDACTED***" if any(k in key.lower() for k in _REDACTED_KEYS) else value
        for key, value in details.items()
    }


@dataclass(frozen=True, slots=True)
class AuditEvent:
    action: AuditAction
    user_id: int | None = None
    ip_address: str | None = None
    success: bool = True
    details: Mapping[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def describe(self) -> str:
        line = (
            f"AUDIT: {self.action.value} | user_id={self.user_id} | "
            f"ip={self.ip_address} | success={self.success}"
        )
        if self.details:
            line += f" | details={dict(self.details)}"
        return line


class AuditLogger:
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def log(
        self,
        action: AuditAction,
        *,
        user_id: int | None = None,
        ip_address: str | None = None,
        details: Mapping[str, Any] | None = None,
        success: bool = True,
    ) -> None:
        self.record(
            AuditEvent(
                action=action,
                user_id=user_id,
                ip_address=ip_address,
                success=success,
                details=_redact(details) if details else {},
            )
        )

    def record(self, event: AuditEvent) -> None:
        if event.success:
            logger.info(event.describe())
        else:
            logger.warning(event.describe())
        self._store(event)

    def _store(self, event: AuditEvent) -> None:
        try:
            with SqlAlchemyUnitOfWork(self._session_factory) as uow:
                uow.session.add(
                    AuditLog(
                        timestamp=event.timestamp,
                        action=event.action.value,
                        user_id=event.user_id,
                        ip_address=event.ip_address,
                        success=event.success,
                        details_json=(
                            json.dumps(dict(event.details), default=str)
                            if event.details
                            else None
                        ),
                    )
                )
        except SQLAlchemyError as db_error:
            logger.warning(f"audit: could not store {event.action.value}: {db_error}")


__all__ = ["AuditAction", "AuditEvent", "AuditLogger"]
