# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolationError, NotOwnerError
from .ownership import OwnedResource, authorize_mutation, is_owner
from .restaurants.entities import Location, Restaurant, RestaurantDraft, RestaurantPatch
from .reviews.entities import Review
from .users.entities import AuthenticatedIdentity, SessionClaims, User

__all__ = [
    "AuthenticatedIdentity",
    "InvariantViolationError",
    "Location",
    "NotOwnerError",
    "OwnedResource",
    "Restaurant",
    "RestaurantDraft",
    "RestaurantPatch",
    "Review",
    "SessionClaims",
    "User",
    "authorize_mutation",
    "is_owner",
]
