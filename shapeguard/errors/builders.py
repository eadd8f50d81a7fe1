"""Usage Error Builders

Ergonomic constructors for the usage errors raised while composing or
checking descriptors. Each builder fills in code, message and metadata.
"""
from typing import Any, Callable, Iterable

from .types import (
    ErrorContext,
    InvalidBoundsError,
    SyncUsageOnAsyncRuleError,
    UnknownMessageKeyError,
)


def invalid_bounds(min_value: Any, max_value: Any, *, origin: str = "") -> InvalidBoundsError:
    """min > max for a range or length refinement."""
    return InvalidBoundsError(
        message=f"min > max ({min_value!r} > {max_value!r})",
        context=ErrorContext(origin=origin),
        metadata={"min": min_value, "max": max_value},
    )


def bound_type_mismatch(bound: Any, expected: str, *, origin: str = "") -> InvalidBoundsError:
    """A bound that cannot be compared with the values the refinement checks."""
    return InvalidBoundsError(
        message=f"Bound {bound!r} is not a {expected}",
        context=ErrorContext(origin=origin),
        metadata={"bound": bound, "expected": expected},
    )


def sync_on_async_rule(
    validator: Callable[..., Any],
    path: Iterable[str],
    *,
    origin: str = "",
) -> SyncUsageOnAsyncRuleError:
    """An asynchronous custom rule was invoked by a synchronous check."""
    name = getattr(validator, "__qualname__", None) or repr(validator)
    return SyncUsageOnAsyncRuleError(
        message=f"Custom rule {name} is asynchronous; use check()/validate() instead of the sync variants",
        context=ErrorContext(origin=origin),
        metadata={"validator": name, "path": list(path)},
    )


def unknown_message_key(keys: Iterable[str], *, origin: str = "") -> UnknownMessageKeyError:
    """Message overrides that name keys outside the catalog."""
    unknown = sorted(keys)
    return UnknownMessageKeyError(
        message=f"Unknown message key(s): {', '.join(unknown)}",
        context=ErrorContext(origin=origin),
        metadata={"keys": unknown},
    )
