"""In-memory doubles for the repository and service ports."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from reviewhub.domain.restaurants.entities import Restaurant, RestaurantDraft, RestaurantPatch
from reviewhub.domain.restaurants.exceptions import RestaurantNameTakenError
from reviewhub.domain.restaurants.repositories import RestaurantRepository
from reviewhub.domain.reviews.entities import Review
from reviewhub.domain.reviews.repositories import ReviewRepository
from reviewhub.domain.users.entities import SessionClaims, User
from reviewhub.domain.users.exceptions import (
    CorruptPasswordHashError,
    InvalidSessionError,
    UserAlreadyRegisteredError,
)
from reviewhub.domain.users.repositories import PasswordHasher, SessionTokenService, UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def add(self, username: str, password_hash: str) -> User:
        if username in self._users:
            raise UserAlreadyRegisteredError()
        user = User(
            id=self._seq,
            username=username,
            password_hash=password_hash,
            created_at=datetime.now(UTC),
        )
        self._seq += 1
        self._users[username] = user
        return user

    def remove(self, username: str) -> None:
        self._users.pop(username, None)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed.startswith("hashed:"):
            raise CorruptPasswordHashError()
        return hashed == f"hashed:{password}"


class FakeTokenService(SessionTokenService):
    """Tokens are ``token-<username>``; ``expired-<username>`` is never valid."""

    def issue(self, username: str) -> str:
        return f"token-{username}"

    def verify(self, token: str) -> SessionClaims:
        if not token.startswith("token-"):
            raise InvalidSessionError()
        now = datetime.now(UTC)
        return SessionClaims(username=token.removeprefix("token-"), issued_at=now, expires_at=now)


class InMemoryRestaurantRepository(RestaurantRepository):
    def __init__(self, reviews: InMemoryReviewRepository | None = None) -> None:
        self.rows: dict[int, Restaurant] = {}
        self._seq = 1
        self._reviews = reviews or InMemoryReviewRepository()

    def find_by_id(self, restaurant_id: int) -> Restaurant | None:
        return self.rows.get(restaurant_id)

    def list(self, name: str | None = None) -> Sequence[Restaurant]:
        return [r for r in self.rows.values() if name is None or r.name == name]

    def add(self, draft: RestaurantDraft, owner_id: int) -> Restaurant:
        if any(r.name == draft.name for r in self.rows.values()):
            raise RestaurantNameTakenError()
        restaurant = Restaurant(
            id=self._seq,
            owner_id=owner_id,
            name=draft.name,
            description=draft.description,
            location=draft.location,
            image_url=draft.image_url,
        )
        self.rows[restaurant.id] = restaurant
        self._seq += 1
        return restaurant

    def update(self, restaurant_id: int, patch: RestaurantPatch) -> Restaurant | None:
        current = self.rows.get(restaurant_id)
        if current is None:
            return None
        updated = Restaurant(
            id=current.id,
            owner_id=current.owner_id,
            name=patch.name if patch.name is not None else current.name,
            description=(
                patch.description if patch.description is not None else current.description
            ),
            location=patch.location if patch.location is not None else current.location,
            image_url=patch.image_url if patch.image_url is not None else current.image_url,
        )
        self.rows[restaurant_id] = updated
        return updated

    def delete_with_reviews(self, restaurant_id: int) -> int | None:
        if self.rows.pop(restaurant_id, None) is None:
            return None
        doomed = [cid for cid, r in self._reviews.rows.items() if r.restaurant_id == restaurant_id]
        for cid in doomed:
            del self._reviews.rows[cid]
        return len(doomed)


class InMemoryReviewRepository(ReviewRepository):
    def __init__(self) -> None:
        self.rows: dict[int, Review] = {}
        self._seq = 1

    def find_by_id(self, review_id: int) -> Review | None:
        return self.rows.get(review_id)

    def list_for_restaurant(self, restaurant_id: int) -> Sequence[Review]:
        return [r for r in self.rows.values() if r.restaurant_id == restaurant_id]

    def add(self, author_id: int, restaurant_id: int, content: str) -> Review:
        review = Review(
            id=self._seq, author_id=author_id, restaurant_id=restaurant_id, content=content
        )
        self.rows[review.id] = review
        self._seq += 1
        return review

    def update(self, review_id: int, content: str) -> Review | None:
        current = self.rows.get(review_id)
        if current is None:
            return None
        updated = Review(
            id=current.id,
            author_id=current.author_id,
            restaurant_id=current.restaurant_id,
            content=content,
        )
        self.rows[review_id] = updated
        return updated

    def delete(self, review_id: int) -> bool:
        return self.rows.pop(review_id, None) is not None

