"""
Unit tests for the create_admin bootstrap command.
"""
from unittest.mock import patch

import pytest

from shop_api.core.security import verify_password
from shop_api.domain.models.user import User
from shop_api.scripts.create_admin import _run, ensure_admin, normalize_email, parse_args


def test_parse_args():
    args = parse_args(["Root", "root@example.com", "--password", "s3cret"])
    assert args.name == "Root"
    assert args.email == "root@example.com"
    assert args.password == "s3cret"


def test_password_is_optional():
    assert parse_args(["Root", "root@example.com"]).password is None


@pytest.mark.asyncio
async def test_creates_new_admin(user_repo, mock_settings):
    user = await ensure_admin(user_repo, "Root", "root@example.com", "s3cret")
    assert user.is_admin is True
    assert verify_password("s3cret", user_repo.users[user.id].hashed_password)


@pytest.mark.asyncio
async def test_promotes_existing_account(user_repo):
    existing = await user_repo.save(User(
        id=None, name="Ann", email="ann@example.com", hashed_password="$2b$04$hash"
    ))

    user = await ensure_admin(user_repo, "ignored", "ann@example.com", None)

    assert user.id == existing.id
    assert user.is_admin is True
    assert user_repo.users[existing.id].hashed_password == "$2b$04$hash"


@pytest.mark.asyncio
async def test_new_account_requires_password(user_repo):
    with pytest.raises(ValueError, match="password is required"):
        await ensure_admin(user_repo, "Root", "root@example.com", None)


def test_normalize_email_keeps_local_part_case():
    assert normalize_email(" Alice@Example.COM ") == "Alice@example.com"


@pytest.mark.asyncio
async def test_run_promotes_mixed_case_account(user_repo, mock_settings):
    existing = await user_repo.save(User(
        id=None, name="Alice", email="Alice@x.com", hashed_password="$2b$04$hash"
    ))

    with patch("shop_api.scripts.create_admin.MongoUserRepository", return_value=user_repo):
        exit_code = await _run(parse_args(["Alice", "Alice@x.com", "--password", "pw2"]))

    assert exit_code == 0
    assert len(user_repo.users) == 1
    assert user_repo.users[existing.id].is_admin is True
    assert user_repo.users[existing.id].hashed_password == "$2b$04$hash"


@pytest.mark.asyncio
async def test_run_rejects_invalid_email(user_repo):
    with patch("shop_api.scripts.create_admin.MongoUserRepository", return_value=user_repo):
        exit_code = await _run(parse_args(["Root", "not-an-email", "--password", "pw"]))

    assert exit_code == 1
    assert user_repo.users == {}
