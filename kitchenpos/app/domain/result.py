"""Explicit success/failure values returned by the application services.

Services never raise for expected failures. They return either :class:`Ok`
wrapping the produced value or :class:`Err` carrying an :class:`ErrorKind`
and a human readable message, and the caller decides what to do with each
case (the HTTP layer maps kinds to status codes).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Categories of expected failures."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False


def invalid_argument(message: str) -> Err:
    return Err(ErrorKind.INVALID_ARGUMENT, message)


def not_found(message: str) -> Err:
    return Err(ErrorKind.NOT_FOUND, message)


def conflict(message: str) -> Err:
    return Err(ErrorKind.CONFLICT, message)


Result = Union[Ok[T], Err]
