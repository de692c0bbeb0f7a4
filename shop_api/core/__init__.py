from .config import Settings, get_settings
from .security import (
    InvalidAccessToken,
    hash_password,
    verify_password,
    issue_access_token,
    read_token_subject,
)

__all__ = [
    "Settings",
    "get_settings",
    "InvalidAccessToken",
    "hash_password",
    "verify_password",
    "issue_access_token",
    "read_token_subject",
]
