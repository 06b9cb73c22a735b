# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    password_hash: str = field(repr=False)
    created_at: datetime


@dataclass(slots=True, frozen=True)
class SessionClaims:
    """Verified contents of a session token."""

    username: str
    issued_at: datetime
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class AuthenticatedIdentity:
    """The acting user, resolved from a verified token against the user store.

    Passed explicitly from the transport layer into every use case that
    needs to know who is acting.
    """

    id: int
    username: str

    def to_dict(self) -> dict[str, int | str]:
        return {"id": self.id, "username": self.username}
