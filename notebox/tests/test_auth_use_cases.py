from __future__ import annotations

import pytest
from fakes import DeterministicHasher, FakeTokenService, InMemoryUserRepository

from notebox.application.use_cases.users.authenticate_request import (
    AuthenticateRequestUseCase,
    extract_bearer_token,
)
from notebox.application.use_cases.users.login_user import LoginUserUseCase
from notebox.application.use_cases.users.register_user import RegisterUserUseCase
from notebox.application.use_cases.users.update_profile import UpdateProfileUseCase
from notebox.domain.users.exceptions import (
    EmailAlreadyInUseError,
    InvalidCredentialsError,
    MalformedTokenError,
    MissingTokenError,
    NothingToUpdateError,
    UnknownUserError,
)


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def register(users: InMemoryUserRepository, hasher: DeterministicHasher) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, tokens=FakeTokenService(), password_hasher=hasher)


def test_register_user_success(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    user, token = register.execute("Alice", "alice@example.com", "secret123")

    assert user.name == "Alice"
    assert user.theme is False
    assert user.password_hash == "hashed:secret123"
    assert token == f"token-{user.id}"
    assert users.find_by_email("alice@example.com") == user


def test_register_user_duplicate_email_keeps_first_record(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    first, _ = register.execute("Alice", "alice@example.com", "secret123")

    with pytest.raises(EmailAlreadyInUseError) as exc:
        register.execute("Mallory", "alice@example.com", "other")

    assert exc.value.to_dict() == {"error": "Email already in use"}
    assert users.find_by_email("alice@example.com") == first


def test_login_user_success(
    register: RegisterUserUseCase, users: InMemoryUserRepository, hasher: DeterministicHasher
) -> None:
    registered, _ = register.execute("Alice", "alice@example.com", "secret123")

    login = LoginUserUseCase(users=users, tokens=FakeTokenService(), password_hasher=hasher)
    user, token = login.execute("alice@example.com", "secret123")

    assert user == registered
    assert token == f"token-{registered.id}"


@pytest.mark.parametrize(
    ("email", "password"),
    [("alice@example.com", "wrong"), ("nobody@example.com", "secret123")],
)
def test_login_user_invalid_credentials_are_indistinguishable(
    register: RegisterUserUseCase,
    users: InMemoryUserRepository,
    hasher: DeterministicHasher,
    email: str,
    password: str,
) -> None:
    register.execute("Alice", "alice@example.com", "secret123")
    login = LoginUserUseCase(users=users, tokens=FakeTokenService(), password_hasher=hasher)

    with pytest.raises(InvalidCredentialsError) as exc:
        login.execute(email, password)

    assert exc.value.status == 401
    assert exc.value.to_dict() == {"error": "Invalid credentials"}


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("Bearer abc.def", "abc.def"),
        ("Bearer ", None),
        ("Basic abc", None),
        ("abc.def", None),
        ("", None),
        (None, None),
    ],
)
def test_extract_bearer_token(header: str | None, expected: str | None) -> None:
    assert extract_bearer_token(header) == expected


def test_authenticate_request_resolves_user(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    user, token = register.execute("Alice", "alice@example.com", "secret123")
    guard = AuthenticateRequestUseCase(users=users, tokens=FakeTokenService())

    context = guard.execute(f"Bearer {token}")

    assert context.user == user
    assert context.token == token


def test_authenticate_request_without_token(users: InMemoryUserRepository) -> None:
    guard = AuthenticateRequestUseCase(users=users, tokens=FakeTokenService())

    with pytest.raises(MissingTokenError) as exc:
        guard.execute(None)

    assert exc.value.to_dict() == {
        "error": "Please authenticate",
        "details": "No token provided",
    }


def test_authenticate_request_with_bad_token(users: InMemoryUserRepository) -> None:
    guard = AuthenticateRequestUseCase(users=users, tokens=FakeTokenService())

    with pytest.raises(MalformedTokenError) as exc:
        guard.execute("Bearer garbage")

    assert exc.value.details == "Invalid token format"


def test_authenticate_request_for_unknown_user(users: InMemoryUserRepository) -> None:
    guard = AuthenticateRequestUseCase(users=users, tokens=FakeTokenService())

    with pytest.raises(UnknownUserError) as exc:
        guard.execute("Bearer token-missing")

    assert exc.value.status == 401
    assert exc.value.details == "User not found"


def test_update_profile_without_password_keeps_hash(
    register: RegisterUserUseCase, users: InMemoryUserRepository, hasher: DeterministicHasher
) -> None:
    user, _ = register.execute("Alice", "alice@example.com", "secret123")
    update = UpdateProfileUseCase(users=users, password_hasher=hasher)
    calls_before = hasher.calls

    updated = update.execute(user.id, name="Alice B", theme=True)

    assert updated.name == "Alice B"
    assert updated.theme is True
    assert updated.password_hash == user.password_hash
    assert hasher.calls == calls_before
    assert updated.updated_at >= user.updated_at


def test_update_profile_with_password_rehashes(
    register: RegisterUserUseCase, users: InMemoryUserRepository, hasher: DeterministicHasher
) -> None:
    user, _ = register.execute("Alice", "alice@example.com", "secret123")
    update = UpdateProfileUseCase(users=users, password_hasher=hasher)

    update.execute(user.id, password="new-secret")

    login = LoginUserUseCase(users=users, tokens=FakeTokenService(), password_hasher=hasher)
    with pytest.raises(InvalidCredentialsError):
        login.execute("alice@example.com", "secret123")
    logged_in, _ = login.execute("alice@example.com", "new-secret")
    assert logged_in.name == "Alice"


def test_update_profile_requires_a_field(
    users: InMemoryUserRepository, hasher: DeterministicHasher
) -> None:
    update = UpdateProfileUseCase(users=users, password_hasher=hasher)

    with pytest.raises(NothingToUpdateError):
        update.execute("anything")
