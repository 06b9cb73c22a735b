from __future__ import annotations

import os
import tempfile
from pathlib import Path

# The engine is built at import time, so the environment must be ready first.
_DB_DIR = Path(tempfile.mkdtemp(prefix="reviewhub-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_DB_DIR / 'test.db'}")
os.environ.setdefault("JWT_SECRET", "test-secret-that-is-at-least-32-bytes-long")
os.environ.setdefault("PASSWORD_HASH_COST", "1000")
os.environ.setdefault("APP_ENV", "test")

import pytest  # noqa: E402
from fakes import (  # noqa: E402
    InMemoryRestaurantRepository,
    InMemoryReviewRepository,
    InMemoryUserRepository,
)


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def restaurants(reviews: InMemoryReviewRepository) -> InMemoryRestaurantRepository:
    return InMemoryRestaurantRepository(reviews)


@pytest.fixture()
def reviews() -> InMemoryReviewRepository:
    return InMemoryReviewRepository()
