# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from reviewhub.domain.exceptions import InvariantViolationError


@dataclass(slots=True, frozen=True)
class Location:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise InvariantViolationError("latitude out of range", field="location.latitude")
        if not -180.0 <= self.longitude <= 180.0:
            raise InvariantViolationError("longitude out of range", field="location.longitude")


@dataclass(slots=True, frozen=True)
class RestaurantDraft:
    name: str
    description: str
    location: Location
    image_url: str


@dataclass(slots=True, frozen=True)
class RestaurantPatch:
    """Partial update. ``None`` keeps the stored value; ownership is not patchable."""

    name: str | None = None
    description: str | None = None
    location: Location | None = None
    image_url: str | None = None

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.name, self.description, self.location, self.image_url)
        )


@dataclass(slots=True, frozen=True)
class Restaurant:
    id: int
    owner_id: int
    name: str
    description: str
    location: Location
    image_url: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            "name": self.name,
            "description": self.description,
            "location": asdict(self.location),
            "image_url": self.image_url,
        }
