"""Explicit result type carried between pipeline stages.

Every stage returns either ``Ok(value)`` or ``Err(error)``; the pipeline checks
the variant and stops at the first ``Err``.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UPSTREAM = "upstream"


@dataclass(frozen=True)
class GatewayError:
    """A failure raised by one pipeline stage.

    ``message`` is safe to return to the caller. ``detail`` holds the
    underlying diagnostic text and is only logged.
    """
    kind: ErrorKind
    message: str
    detail: Optional[str] = None

    @property
    def diagnostic(self) -> str:
        return self.detail or self.message

    @classmethod
    def validation(cls, message: str) -> "GatewayError":
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def not_found(cls, message: str, detail: Optional[str] = None) -> "GatewayError":
        return cls(ErrorKind.NOT_FOUND, message, detail)

    @classmethod
    def upstream(cls, message: str, detail: Optional[str] = None) -> "GatewayError":
        return cls(ErrorKind.UPSTREAM, message, detail)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: GatewayError

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
