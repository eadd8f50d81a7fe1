"""Error Handling System

Key components:
- ErrorCode: Hierarchical error code taxonomy
- ShapeguardError: Base exception with code, context and metadata
- UsageError family: malformed schemas and protocol misuse
- Builder functions: Ergonomic error construction

Usage:
    from shapeguard.errors import UsageError, invalid_bounds

    if max_value is not None and min_value > max_value:
        raise invalid_bounds(min_value, max_value, origin="NumberDescriptor.range")
"""
from .types import (
    ErrorCode,
    ErrorContext,
    ShapeguardError,
    UsageError,
    InvalidBoundsError,
    SyncUsageOnAsyncRuleError,
    UnknownMessageKeyError,
)

from .builders import (
    invalid_bounds,
    bound_type_mismatch,
    sync_on_async_rule,
    unknown_message_key,
)

__all__ = [
    # Core types
    "ErrorCode",
    "ErrorContext",
    "ShapeguardError",
    # Usage errors (E7xxx)
    "UsageError",
    "InvalidBoundsError",
    "SyncUsageOnAsyncRuleError",
    "UnknownMessageKeyError",
    # Builders
    "invalid_bounds",
    "bound_type_mismatch",
    "sync_on_async_rule",
    "unknown_message_key",
]
