# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Single-owner authorization for mutations of owned resources."""

from __future__ import annotations

from typing import Protocol

from .exceptions import NotOwnerError


class OwnedResource(Protocol):
    @property
    def owner_id(self) -> int: ...


def is_owner(acting_identity_id: int, resource: OwnedResource) -> bool:
    return resource.owner_id == acting_identity_id


def authorize_mutation(acting_identity_id: int, resource: OwnedResource) -> None:
    """Allow the update or delete only when the actor owns ``resource``.

    Raises NotOwnerError without any detail about who the owner is.
    """
    if not is_owner(acting_identity_id, resource):
        raise NotOwnerError()
