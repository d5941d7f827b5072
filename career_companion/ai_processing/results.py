"""
Result and error types returned by the AI orchestration flows.

Every flow returns an ``AIResult``. Business code branches on ``success``
and ``error_kind``; code that prefers exceptions calls ``unwrap()``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

PARSE_ERROR_MESSAGE = "Failed to parse the AI response. Please try again."


class AIErrorKind(Enum):
    """Failure categories for AI flows."""
    TRANSPORT = "transport"
    PARSE = "parse"
    CONFIGURATION = "configuration"


class AIServiceError(Exception):
    """Operation-specific failure surfaced to the user."""

    def __init__(self, message: str, kind: AIErrorKind = AIErrorKind.TRANSPORT, operation: str = ""):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.operation = operation


class AIParseError(AIServiceError):
    """The AI answered, but not in the declared response shape."""

    def __init__(self, message: str = PARSE_ERROR_MESSAGE, operation: str = ""):
        super().__init__(message, kind=AIErrorKind.PARSE, operation=operation)


@dataclass
class AIResult(Generic[T]):
    """Tagged outcome of one AI flow."""
    success: bool
    operation: str
    data: Optional[T] = None
    error: Optional[str] = None
    error_kind: Optional[AIErrorKind] = None

    @classmethod
    def ok(cls, operation: str, data: T) -> "AIResult[T]":
        return cls(success=True, operation=operation, data=data)

    @classmethod
    def fail(cls, operation: str, error: str, kind: AIErrorKind) -> "AIResult[T]":
        return cls(success=False, operation=operation, error=error, error_kind=kind)

    @property
    def is_parse_error(self) -> bool:
        return self.error_kind is AIErrorKind.PARSE

    def unwrap(self) -> T:
        """Return the payload or raise the matching ``AIServiceError``."""
        if self.success:
            return self.data
        if self.error_kind is AIErrorKind.PARSE:
            raise AIParseError(self.error or PARSE_ERROR_MESSAGE, operation=self.operation)
        raise AIServiceError(
            self.error or "AI request failed.",
            kind=self.error_kind or AIErrorKind.TRANSPORT,
            operation=self.operation,
        )
