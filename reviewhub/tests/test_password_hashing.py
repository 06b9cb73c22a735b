from __future__ import annotations

import pytest

from reviewhub.application.services.password_hashing import WerkzeugPasswordHasher
from reviewhub.domain.users.exceptions import CorruptPasswordHashError


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(cost=1000)


def test_hash_verifies_original_password(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("pw1")

    assert hasher.verify("pw1", hashed) is True
    assert hasher.verify("pw2", hashed) is False


def test_hash_is_salted(hasher: WerkzeugPasswordHasher) -> None:
    first = hasher.hash("same password")
    second = hasher.hash("same password")

    assert first != second
    assert "same password" not in first


def test_hash_encodes_cost(hasher: WerkzeugPasswordHasher) -> None:
    assert hasher.hash("pw1").startswith("pbkdf2:sha256:1000$")


def test_hash_made_at_other_cost_still_verifies(hasher: WerkzeugPasswordHasher) -> None:
    legacy = WerkzeugPasswordHasher(cost=2000).hash("pw1")

    assert hasher.verify("pw1", legacy) is True


def test_empty_password_is_hashable(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("")

    assert hasher.verify("", hashed) is True
    assert hasher.verify(" ", hashed) is False


@pytest.mark.parametrize("stored", ["", "plaintext", "md5$abc$def", "pbkdf2:sha256:1000$$"])
def test_corrupt_hash_is_reported(hasher: WerkzeugPasswordHasher, stored: str) -> None:
    with pytest.raises(CorruptPasswordHashError):
        hasher.verify("pw1", stored)


def test_non_positive_cost_is_rejected() -> None:
    with pytest.raises(ValueError):
        WerkzeugPasswordHasher(cost=0)
