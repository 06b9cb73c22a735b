from __future__ import annotations

from pydantic import BaseModel, Field

from reviewhub.domain.restaurants.entities import Location, RestaurantDraft, RestaurantPatch


class LocationDTO(BaseModel):
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    def to_domain(self) -> Location:
        return Location(latitude=self.latitude, longitude=self.longitude)


class CreateRestaurantRequestDTO(BaseModel):
    name: str = Field(min_length=1, max_length=128)
    description: str = Field(min_length=1, max_length=2048)
    location: LocationDTO
    image_url: str = Field(min_length=1, max_length=1024)

    def to_domain(self) -> RestaurantDraft:
        return RestaurantDraft(
            name=self.name,
            description=self.description,
            location=self.location.to_domain(),
            image_url=self.image_url,
        )


class UpdateRestaurantRequestDTO(BaseModel):
    """Every field is optional; owner is never accepted from the client."""

    name: str | None = Field(None, min_length=1, max_length=128)
    description: str | None = Field(None, min_length=1, max_length=2048)
    location: LocationDTO | None = None
    image_url: str | None = Field(None, min_length=1, max_length=1024)

    def to_domain(self) -> RestaurantPatch:
        return RestaurantPatch(
            name=self.name,
            description=self.description,
            location=self.location.to_domain() if self.location else None,
            image_url=self.image_url,
        )
