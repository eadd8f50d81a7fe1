"""shapeguard: composable, immutable type descriptors with sync and async checks.

Usage:
    from shapeguard import Types, ValidationFailure, configure_messages

    point = Types.object({"x": Types.number(), "y": Types.number()})
    point.check_sync({"x": 1, "y": "2"})
    # [ErrorMessage(path=('y',), message='is not a number')]
"""
from .builders import Types
from .descriptors import (
    Descriptor,
    ErrorMessage,
    ValidationFailure,
    Validator,
    ObjectDescriptor,
    ArrayDescriptor,
    AnyDescriptor,
    StringDescriptor,
    NumberDescriptor,
    BooleanDescriptor,
    FunctionDescriptor,
    RegExpDescriptor,
    DateDescriptor,
    EnumDescriptor,
)
from .errors import (
    ErrorCode,
    ShapeguardError,
    UsageError,
    InvalidBoundsError,
    SyncUsageOnAsyncRuleError,
    UnknownMessageKeyError,
)
from .messages import MessageCatalog, configure_messages, reset_messages, get_message

__version__ = "0.1.0"

__all__ = [
    "Types",
    # Descriptors
    "Descriptor",
    "Validator",
    "ObjectDescriptor",
    "ArrayDescriptor",
    "AnyDescriptor",
    "StringDescriptor",
    "NumberDescriptor",
    "BooleanDescriptor",
    "FunctionDescriptor",
    "RegExpDescriptor",
    "DateDescriptor",
    "EnumDescriptor",
    # Errors
    "ErrorMessage",
    "ValidationFailure",
    "ErrorCode",
    "ShapeguardError",
    "UsageError",
    "InvalidBoundsError",
    "SyncUsageOnAsyncRuleError",
    "UnknownMessageKeyError",
    # Messages
    "MessageCatalog",
    "configure_messages",
    "reset_messages",
    "get_message",
]
