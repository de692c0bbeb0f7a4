"""
Tagged outcome returned by every account use case.

Use cases report expected failures (bad credentials, unknown ids, duplicate
emails, rejected data) as an ``AccountError`` instead of raising, and the
HTTP layer translates the tag into a status code.
"""
# Standard library imports
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class AccountErrorKind(str, Enum):
    """Categories of expected account-operation failures"""
    UNAUTHORIZED = "unauthorized"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"


@dataclass(frozen=True)
class AccountError:
    kind: AccountErrorKind
    message: str


@dataclass(frozen=True)
class UseCaseResult(Generic[T]):
    """Either a success value or an AccountError, never both"""
    value: Optional[T] = None
    error: Optional[AccountError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "UseCaseResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: AccountErrorKind, message: str) -> "UseCaseResult[T]":
        return cls(error=AccountError(kind=kind, message=message))
