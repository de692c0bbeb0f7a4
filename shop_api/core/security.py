# Standard library imports
from datetime import datetime, timedelta, timezone

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings

SUBJECT_CLAIM = "sub"


class InvalidAccessToken(ValueError):
    """Raised when a bearer token cannot be tied to an account"""


def hash_password(plain_password: str) -> str:
    """
    Hash a password for storage with a fresh bcrypt salt

    The work factor comes from ``BCRYPT_ROUNDS`` so tests can run cheaply.
    """
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a login attempt against a stored hash

    Returns:
        True on a match. Missing or malformed stored hashes never match.
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def issue_access_token(user_id: str) -> str:
    """
    Sign a bearer token naming ``user_id`` as its subject

    The token carries no role or profile data; callers are re-read from the
    store on every request.
    """
    if not user_id:
        raise ValueError("Cannot issue a token without a user id")

    settings = get_settings()
    issued_at = datetime.now(timezone.utc)
    claims = {
        SUBJECT_CLAIM: user_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.access_token_expire_minutes),
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def read_token_subject(token: str) -> str:
    """
    Verify signature and expiry, then return the subject user id

    Raises:
        InvalidAccessToken: If the token is malformed, tampered with, expired
            or has no subject
    """
    settings = get_settings()
    try:
        claims = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except InvalidTokenError as e:
        raise InvalidAccessToken(f"Invalid token: {e}") from e

    subject = claims.get(SUBJECT_CLAIM)
    if not isinstance(subject, str) or not subject:
        raise InvalidAccessToken("Invalid token: no subject")
    return subject
