"""Descriptor System

Descriptors are immutable nodes describing the expected shape of a value.
They compose into trees and check values synchronously or asynchronously,
reporting path-qualified errors.

Key Features:
- Frozen dataclass descriptors; every refinement returns a new descriptor
- Sync and async check protocols with identical semantics
- Object fields and array elements checked concurrently on the async path
- Custom rules as plain functions or coroutine functions

Usage:
    from shapeguard import Types

    user = Types.object({
        "name": Types.string().length(1, 32),
        "age": Types.number().integer().range(0, 150),
        "tags": Types.array([Types.string()]).nullable(),
    })

    errors = user.check_sync({"name": "", "age": 3.5})
    await user.validate(payload)   # raises ValidationFailure
"""
from .base import (
    Descriptor,
    Path,
    Validator,
)

from .errors import (
    ErrorMessage,
    ValidationFailure,
    format_path,
)

from .objects import ObjectDescriptor
from .arrays import ArrayDescriptor
from .enums import EnumDescriptor
from .scalars import (
    AnyDescriptor,
    StringDescriptor,
    NumberDescriptor,
    BooleanDescriptor,
    FunctionDescriptor,
    RegExpDescriptor,
    DateDescriptor,
)

from .rules import bounded, ensure_ordered

__all__ = [
    # Base
    "Descriptor",
    "Path",
    "Validator",
    # Errors
    "ErrorMessage",
    "ValidationFailure",
    "format_path",
    # Containers
    "ObjectDescriptor",
    "ArrayDescriptor",
    # Scalars
    "AnyDescriptor",
    "StringDescriptor",
    "NumberDescriptor",
    "BooleanDescriptor",
    "FunctionDescriptor",
    "RegExpDescriptor",
    "DateDescriptor",
    "EnumDescriptor",
    # Rules
    "bounded",
    "ensure_ordered",
]
