"""
Outcome entities returned by product operations.

An operation either succeeds with a value or fails with a classified,
caller-facing failure. Translation to HTTP status codes happens at the
controller boundary (see app.core.errors).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class FailureKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    VALIDATION = "VALIDATION"
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """
    Expected domain failure.

    The message is surfaced verbatim to the caller, so it must never carry
    internal detail.
    """
    kind: FailureKind
    message: str

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def not_found(cls, message: str = "Product not found") -> "Failure":
        return cls(FailureKind.NOT_FOUND, message)

    @classmethod
    def validation(cls, message: str) -> "Failure":
        return cls(FailureKind.VALIDATION, message)

    @classmethod
    def bad_request(cls, message: str) -> "Failure":
        return cls(FailureKind.BAD_REQUEST, message)

    @classmethod
    def unauthorized(cls, message: str) -> "Failure":
        return cls(FailureKind.UNAUTHORIZED, message)


Outcome = Union[Success[T], Failure]
