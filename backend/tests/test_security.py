"""Token and role-gate tests."""
import pytest
from fastapi import HTTPException
from jose import JWTError

from conftest import FakeUser
from tracker.core.deps import require_role
from tracker.core.security import create_access_token, decode_token


def test_access_token_round_trip_carries_subject_and_role():
    token = create_access_token(subject="alice", role="user")

    payload = decode_token(token)

    assert payload["sub"] == "alice"
    assert payload["role"] == "user"
    assert payload["type"] == "access"


def test_tampered_token_is_rejected():
    token = create_access_token(subject="alice", role="user")
    header, body, signature = token.split(".")
    tampered = ".".join([header, body, signature[::-1]])

    with pytest.raises(JWTError):
        decode_token(tampered)


@pytest.mark.asyncio
async def test_require_role_allows_listed_role():
    check = require_role("admin", "user")
    user = FakeUser(role="user")

    assert await check(user=user) is user


@pytest.mark.asyncio
async def test_require_role_rejects_other_roles_with_403():
    check = require_role("admin")

    with pytest.raises(HTTPException) as exc_info:
        await check(user=FakeUser(role="user"))

    assert exc_info.value.status_code == 403
