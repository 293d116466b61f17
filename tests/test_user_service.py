"""Tests for user service and tokens."""

from uuid import uuid4

import pytest

from scale_down.errors import (
    ForbiddenError,
    UnauthorizedError,
    UserNameTakenError,
    UserNotFoundError,
)
from scale_down.services.auth import TokenService, hash_password, verify_password
from scale_down.services.users import UserService
from tests.conftest import InMemoryUserRepository


def _service() -> UserService:
    return UserService(InMemoryUserRepository(), TokenService("secret"))


def test_password_hash_roundtrip() -> None:
    hashed = hash_password("hunter22")

    assert hashed != "hunter22"
    assert verify_password("hunter22", hashed)
    assert not verify_password("hunter23", hashed)
    assert not verify_password("hunter22", "not-a-hash")


def test_token_roundtrip_and_rejection() -> None:
    tokens = TokenService("secret", ttl_days=30)
    user_id = uuid4()

    issued = tokens.issue(user_id)

    assert issued.token_type == "Bearer"
    assert issued.expires_in == 2592000
    assert tokens.verify(issued.token) == user_id
    with pytest.raises(UnauthorizedError):
        TokenService("other-secret").verify(issued.token)
    with pytest.raises(UnauthorizedError):
        tokens.verify("garbage")


def test_register_rejects_taken_name() -> None:
    service = _service()
    service.register("matt", "password")

    with pytest.raises(UserNameTakenError):
        service.register("matt", "password")


def test_authenticate_checks_user_and_password() -> None:
    service = _service()
    user = service.register("matt", "password")

    token = service.authenticate("matt", "password")

    assert service.token_service.verify(token.token) == user.id
    with pytest.raises(ForbiddenError):
        service.authenticate("matt", "wrong-password")
    with pytest.raises(UserNotFoundError):
        service.authenticate("nobody", "password")


def test_rename_requires_password_and_free_name() -> None:
    service = _service()
    user = service.register("matt", "password")
    service.register("zak", "password")

    with pytest.raises(UserNameTakenError):
        service.rename(user.id, "zak", "password")
    with pytest.raises(ForbiddenError):
        service.rename(user.id, "matthew", "wrong-password")

    renamed = service.rename(user.id, "matthew", "password")

    assert renamed.user_name == "matthew"


def test_delete_user() -> None:
    service = _service()
    user = service.register("matt", "password")

    service.delete(user.id)

    with pytest.raises(UserNotFoundError):
        service.get_user(user.id)
