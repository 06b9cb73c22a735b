# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Restaurant, RestaurantDraft, RestaurantPatch


class RestaurantRepository(Protocol):
    def find_by_id(self, restaurant_id: int) -> Restaurant | None: ...
    def list(self, name: str | None = None) -> Sequence[Restaurant]: ...
    def add(self, draft: RestaurantDraft, owner_id: int) -> Restaurant: ...
    def update(self, restaurant_id: int, patch: RestaurantPatch) -> Restaurant | None: ...
    def delete_with_reviews(self, restaurant_id: int) -> int | None:
        """Remove the restaurant and every review of it in one transaction.

        Returns the number of reviews removed, or None when the restaurant
        does not exist. On failure nothing is removed.
        """
        ...
