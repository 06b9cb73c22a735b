from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from reviewhub.application.services.session_tokens import JwtSessionTokenService
from reviewhub.domain.users.exceptions import ExpiredSessionError, InvalidSessionError

SECRET = "unit-test-secret-with-enough-bytes-for-hs256"
ISSUED_AT = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


class FixedClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(ISSUED_AT)


@pytest.fixture()
def service(clock: FixedClock) -> JwtSessionTokenService:
    return JwtSessionTokenService(SECRET, ttl=timedelta(hours=1), clock=clock)


def test_token_verifies_within_ttl(service: JwtSessionTokenService, clock: FixedClock) -> None:
    token = service.issue("alice")
    clock.advance(timedelta(minutes=59))

    claims = service.verify(token)

    assert claims.username == "alice"
    assert claims.issued_at == ISSUED_AT
    assert claims.expires_at == ISSUED_AT + timedelta(hours=1)


def test_fractional_issue_time_keeps_the_full_ttl(
    service: JwtSessionTokenService, clock: FixedClock
) -> None:
    clock.advance(timedelta(milliseconds=900))
    token = service.issue("alice")
    clock.advance(timedelta(hours=1) - timedelta(milliseconds=50))

    claims = service.verify(token)

    assert claims.issued_at == ISSUED_AT
    assert claims.expires_at == ISSUED_AT + timedelta(hours=1, seconds=1)


def test_token_expires_after_ttl(service: JwtSessionTokenService, clock: FixedClock) -> None:
    token = service.issue("alice")
    clock.advance(timedelta(minutes=61))

    with pytest.raises(ExpiredSessionError):
        service.verify(token)


def test_tampered_token_is_invalid(service: JwtSessionTokenService) -> None:
    token = service.issue("alice")
    header, payload, signature = token.split(".")
    flipped = "A" if signature[0] != "A" else "B"

    with pytest.raises(InvalidSessionError):
        service.verify(f"{header}.{payload}.{flipped}{signature[1:]}")


def test_token_signed_with_other_secret_is_invalid(service: JwtSessionTokenService) -> None:
    other = JwtSessionTokenService("another-secret-with-enough-bytes-for-hs256")

    with pytest.raises(InvalidSessionError):
        service.verify(other.issue("alice"))


def test_forged_expired_token_is_invalid_not_expired(
    service: JwtSessionTokenService, clock: FixedClock
) -> None:
    header, payload, signature = service.issue("alice").split(".")
    flipped = "A" if signature[0] != "A" else "B"
    clock.advance(timedelta(hours=2))

    with pytest.raises(InvalidSessionError):
        service.verify(f"{header}.{payload}.{flipped}{signature[1:]}")


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c", "...."])
def test_malformed_token_is_invalid(service: JwtSessionTokenService, token: str) -> None:
    with pytest.raises(InvalidSessionError):
        service.verify(token)


def test_token_missing_claims_is_invalid(service: JwtSessionTokenService) -> None:
    token = jwt.encode({"username": "alice"}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidSessionError):
        service.verify(token)


def test_token_issued_in_the_future_is_invalid(service: JwtSessionTokenService) -> None:
    iat = int((ISSUED_AT + timedelta(minutes=10)).timestamp())
    token = jwt.encode(
        {"username": "alice", "iat": iat, "exp": iat + 3600}, SECRET, algorithm="HS256"
    )

    with pytest.raises(InvalidSessionError):
        service.verify(token)


def test_non_numeric_expiry_is_invalid(service: JwtSessionTokenService) -> None:
    iat = int(ISSUED_AT.timestamp())
    token = jwt.encode(
        {"username": "alice", "iat": iat, "exp": "tomorrow"}, SECRET, algorithm="HS256"
    )

    with pytest.raises(InvalidSessionError):
        service.verify(token)


def test_alg_none_token_is_invalid(service: JwtSessionTokenService) -> None:
    iat = int(ISSUED_AT.timestamp())
    token = jwt.encode({"username": "alice", "iat": iat, "exp": iat + 60}, None, algorithm="none")

    with pytest.raises(InvalidSessionError):
        service.verify(token)


def test_empty_secret_is_rejected() -> None:
    with pytest.raises(ValueError):
        JwtSessionTokenService("")
