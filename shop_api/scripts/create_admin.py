"""Create an admin account, or promote an existing one, from the command line."""
import argparse
import asyncio
import dataclasses
import getpass
import sys
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import EmailStr, TypeAdapter, ValidationError

from ..core.security import hash_password
from ..domain.models.user import User
from ..domain.repositories.user_repository import UserRepository
from ..infrastructure.db.mongo_connection import close_database
from ..infrastructure.db.mongo_user_repository import MongoUserRepository

_EMAIL = TypeAdapter(EmailStr)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create or promote a shop admin user")
    parser.add_argument("name", help="Display name for the user")
    parser.add_argument("email", help="Email address used to log in")
    parser.add_argument(
        "--password",
        default=None,
        help="Password for a new account (prompted for when omitted)",
    )
    return parser.parse_args(argv)


def normalize_email(email: str) -> str:
    """Apply the same normalization the API applies to submitted emails."""
    return _EMAIL.validate_python(email.strip())


def prompt_for_password() -> str:
    for _ in range(3):
        password = getpass.getpass("Password: ")
        confirm = getpass.getpass("Confirm password: ")
        if password != confirm:
            print("Passwords do not match. Try again.", file=sys.stderr)
            continue
        if not password:
            print("Password must not be empty.", file=sys.stderr)
            continue
        return password
    raise SystemExit("Failed to set password after three attempts.")


async def ensure_admin(
    repository: UserRepository,
    name: str,
    email: str,
    password: Optional[str],
) -> User:
    """
    Promote the account with ``email`` or create a new admin.

    Raises:
        ValueError: If a new account is needed and its data is invalid
    """
    existing = await repository.find_by_email(email)
    if existing is not None:
        if existing.is_admin:
            return existing
        return await repository.save(dataclasses.replace(existing, is_admin=True))

    if not password:
        raise ValueError("A password is required for a new account")
    return await repository.save(User(
        id=None,
        name=name,
        email=email,
        hashed_password=hash_password(password),
        is_admin=True,
    ))


async def _run(args: argparse.Namespace) -> int:
    try:
        email = normalize_email(args.email)
    except ValidationError:
        print(f"Error: {args.email!r} is not a valid email address", file=sys.stderr)
        return 1

    repository = MongoUserRepository()
    existing = await repository.find_by_email(email)
    password = args.password
    if existing is None and password is None:
        password = prompt_for_password()

    try:
        user = await ensure_admin(repository, args.name.strip(), email, password)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Admin user {user.id}: {user.name} <{user.email}>")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    try:
        return asyncio.run(_run(args))
    finally:
        close_database()


if __name__ == "__main__":
    raise SystemExit(main())
