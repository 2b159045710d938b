"""Outcome values returned by the coach manager.

Domain failures are returned rather than raised; the router decides how each
kind is reported to the client.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str


@dataclass(frozen=True)
class ValidationError:
    violations: list[FieldViolation] = field(default_factory=list)


@dataclass(frozen=True)
class NotFound:
    message: str


@dataclass(frozen=True)
class Conflict:
    message: str


Result = Union[Ok[T], ValidationError, NotFound, Conflict]
