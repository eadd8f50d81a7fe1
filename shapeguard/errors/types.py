"""Error Taxonomy and Usage Error Types

Two failure families are kept apart:
- Validation failures: the checked data does not match its descriptor.
- Usage errors: the descriptor tree itself is malformed, or the check
  protocol was misused (e.g. a coroutine rule reached from a sync check).

Both derive from ShapeguardError so a caller can catch everything the
library raises, but neither is a subclass of the other.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E2xxx: Validation failures (bad data)
    E7xxx: Usage errors (bad schema composition or protocol misuse)
    E9xxx: Internal/Unknown errors
    """
    # Validation (E2xxx)
    E2000_VALIDATION_FAILED = 2000

    # Usage (E7xxx)
    E7000_USAGE_GENERIC = 7000
    E7001_INVALID_BOUNDS = 7001
    E7002_SYNC_CHECK_ON_ASYNC_RULE = 7002
    E7003_UNKNOWN_MESSAGE_KEY = 7003

    # Internal (E9xxx)
    E9000_INTERNAL_GENERIC = 9000

    @property
    def category(self) -> str:
        """Human-readable error category."""
        code = self.value
        if 2000 <= code < 3000:
            return "validation"
        if 7000 <= code < 8000:
            return "usage"
        return "internal"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Immutable context for error tracing and debugging."""
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""

    def with_origin(self, origin: str) -> ErrorContext:
        return ErrorContext(correlation_id=self.correlation_id, timestamp=self.timestamp, origin=origin)


@dataclass
class ShapeguardError(Exception):
    """Base exception for everything the library raises.

    All errors carry:
    - Typed error code from taxonomy
    - Human-readable message
    - Structured metadata for debugging
    - Tracing context
    """
    message: str
    code: ErrorCode = ErrorCode.E9000_INTERNAL_GENERIC
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        super().__init__(self.message)

    def __str__(self) -> str: return self.message

    @property
    def error_id(self) -> str:
        """Unique identifier for this error instance."""
        return f"{self.code.name}:{self.context.correlation_id}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize error for logs and reports."""
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "metadata": self.metadata,
            }
        }


@dataclass
class UsageError(ShapeguardError):
    """Programming mistake in how descriptors are composed or checked."""
    code: ErrorCode = ErrorCode.E7000_USAGE_GENERIC


@dataclass
class InvalidBoundsError(UsageError, ValueError):
    """A range/length refinement was built with min > max or non-comparable bounds."""
    code: ErrorCode = ErrorCode.E7001_INVALID_BOUNDS


@dataclass
class SyncUsageOnAsyncRuleError(UsageError):
    """A coroutine custom rule was reached from a synchronous check."""
    code: ErrorCode = ErrorCode.E7002_SYNC_CHECK_ON_ASYNC_RULE


@dataclass
class UnknownMessageKeyError(UsageError, KeyError):
    """A message override names a key the catalog does not define."""
    code: ErrorCode = ErrorCode.E7003_UNKNOWN_MESSAGE_KEY

    def __str__(self) -> str: return self.message
