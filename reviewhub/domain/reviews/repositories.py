# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Review


class ReviewRepository(Protocol):
    def find_by_id(self, review_id: int) -> Review | None: ...
    def list_for_restaurant(self, restaurant_id: int) -> Sequence[Review]: ...
    def add(self, author_id: int, restaurant_id: int, content: str) -> Review: ...
    def update(self, review_id: int, content: str) -> Review | None: ...
    def delete(self, review_id: int) -> bool: ...
