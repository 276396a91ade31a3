from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from notebox.application.services.session_tokens import JwtSessionTokenService
from notebox.domain.users.exceptions import (
    MalformedTokenError,
    MissingTokenError,
    TokenExpiredError,
)

SECRET = "test-secret-key-with-enough-entropy-0123456789"
ISSUED_AT = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


class MovableClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture()
def clock() -> MovableClock:
    return MovableClock(ISSUED_AT)


@pytest.fixture()
def service(clock: MovableClock) -> JwtSessionTokenService:
    return JwtSessionTokenService(secret=SECRET, clock=clock)


def test_issue_and_verify_round_trip(service: JwtSessionTokenService) -> None:
    claims = service.verify(service.issue("user-1"))

    assert claims.subject_id == "user-1"
    assert claims.issued_at == ISSUED_AT
    assert claims.expires_at - claims.issued_at == timedelta(days=7)


def test_token_is_valid_just_before_expiry(
    service: JwtSessionTokenService, clock: MovableClock
) -> None:
    token = service.issue("user-1")
    clock.advance(timedelta(days=6, hours=23))

    assert service.verify(token).subject_id == "user-1"


@pytest.mark.parametrize(
    "elapsed", [timedelta(days=7), timedelta(days=7, minutes=1), timedelta(days=8)]
)
def test_token_expires_after_seven_days(
    service: JwtSessionTokenService, clock: MovableClock, elapsed: timedelta
) -> None:
    token = service.issue("user-1")
    clock.advance(elapsed)

    with pytest.raises(TokenExpiredError) as exc:
        service.verify(token)

    assert exc.value.details == "Token expired"


def test_real_clock_token_expires_on_a_later_clock() -> None:
    token = JwtSessionTokenService(secret=SECRET).issue("user-1")
    later = JwtSessionTokenService(
        secret=SECRET, clock=lambda: datetime.now(UTC) + timedelta(days=8)
    )

    with pytest.raises(TokenExpiredError):
        later.verify(token)


def test_tokens_survive_a_new_service_instance_with_same_secret() -> None:
    token = JwtSessionTokenService(secret=SECRET).issue("user-1")

    assert JwtSessionTokenService(secret=SECRET).verify(token).subject_id == "user-1"


@pytest.mark.parametrize("token", ["garbage", "a.b.c", "Bearer xyz"])
def test_garbage_token_is_malformed(token: str) -> None:
    with pytest.raises(MalformedTokenError) as exc:
        JwtSessionTokenService(secret=SECRET).verify(token)

    assert exc.value.details == "Invalid token format"


def test_tampered_payload_is_malformed() -> None:
    service = JwtSessionTokenService(secret=SECRET)
    header, _, signature = service.issue("alice").split(".")
    _, forged_payload, _ = service.issue("mallory").split(".")

    with pytest.raises(MalformedTokenError):
        service.verify(".".join([header, forged_payload, signature]))


def test_foreign_secret_is_malformed() -> None:
    token = JwtSessionTokenService(secret="another-secret-key-0123456789-abcdef").issue("u")

    with pytest.raises(MalformedTokenError):
        JwtSessionTokenService(secret=SECRET).verify(token)


def test_token_without_subject_is_malformed() -> None:
    now = datetime.now(UTC)
    token = jwt.encode(
        {"iat": now, "exp": now + timedelta(days=1)}, SECRET, algorithm="HS256"
    )

    with pytest.raises(MalformedTokenError):
        JwtSessionTokenService(secret=SECRET).verify(token)


@pytest.mark.parametrize("token", [None, ""])
def test_missing_token(token: str | None) -> None:
    with pytest.raises(MissingTokenError) as exc:
        JwtSessionTokenService(secret=SECRET).verify(token)

    assert exc.value.details == "No token provided"
