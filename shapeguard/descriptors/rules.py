"""Bound Refinement Rules

One policy for every range/length refinement:
- min is always inclusive
- max is inclusive when include=True (<=), exclusive otherwise (<)
- min > max is rejected when the refinement is built, never at check time
- values the descriptor kind would reject are skipped (the base check reports them)
"""
from __future__ import annotations

from typing import Any, Callable

from shapeguard.errors import invalid_bounds
from shapeguard.logging import descriptor_logger
from shapeguard.messages import get_message

from .base import Validator


def ensure_ordered(min_value: Any, max_value: Any, *, origin: str) -> None:
    """Raise InvalidBoundsError when max is given and min > max."""
    if max_value is not None and min_value > max_value:
        descriptor_logger().warning("invalid_bounds", origin=origin, min=repr(min_value), max=repr(max_value))
        raise invalid_bounds(min_value, max_value, origin=origin)


def bounded(
    message_prefix: str,
    min_value: Any,
    max_value: Any = None,
    include: bool = True,
    *,
    accepts: Callable[[Any], bool],
    measure: Callable[[Any], Any] = lambda value: value,
) -> Validator:
    """Build a custom rule comparing measure(value) against [min, max].

    Args:
        message_prefix: Catalog prefix, e.g. "string.length" -> "string.length.min"/".max".
        accepts: Values for which the rule applies.
        measure: Quantity compared with the bounds (len for lengths).
    """
    args = (min_value, max_value, include)

    def rule(value: Any, obj: Any = None, key: str | None = None, path: tuple[str, ...] = ()) -> str | None:
        if not accepts(value): return None
        measured = measure(value)
        if measured < min_value: return get_message(f"{message_prefix}.min", *args)
        if max_value is None: return None
        if (measured > max_value) if include else (measured >= max_value):
            return get_message(f"{message_prefix}.max", *args)
        return None

    rule.__name__ = rule.__qualname__ = message_prefix.replace(".", "_")
    return rule
