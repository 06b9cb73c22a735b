# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class Review:
    id: int
    author_id: int
    restaurant_id: int
    content: str

    @property
    def owner_id(self) -> int:
        return self.author_id

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "author_id": self.author_id,
            "restaurant_id": self.restaurant_id,
            "content": self.content,
        }
