"""Scalar Descriptors

Leaf kinds: each supplies a base predicate, and some add refinements built
as custom rules (length, pattern, integer/floating, range).
"""
from __future__ import annotations

import numbers
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Any, Self

from shapeguard.errors import bound_type_mismatch
from shapeguard.messages import get_message

from .base import Descriptor, Path
from .errors import ErrorMessage
from .rules import bounded, ensure_ordered


def is_number(value: Any) -> bool:
    """Real numbers and Decimal; bool is excluded even though it subclasses int."""
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def is_whole(value: Any) -> bool:
    """False for fractional values, inf and nan."""
    if isinstance(value, Decimal): return value.is_finite() and value == value.to_integral_value()
    return value % 1 == 0


# ============================================================================
# Any
# ============================================================================

@dataclass(frozen=True, slots=True, eq=False)
class AnyDescriptor(Descriptor):
    """Accepts every value, None included. Custom rules still apply."""
    kind = "any"

    def base_validate_sync(self, value: Any, obj: Any = None, key: str | None = None,
                           path: Path = ()) -> list[ErrorMessage]:
        return []

    async def base_validate(self, value: Any, obj: Any = None, key: str | None = None,
                            path: Path = ()) -> list[ErrorMessage]:
        return []


# ============================================================================
# String
# ============================================================================

@dataclass(frozen=True, slots=True, eq=False)
class StringDescriptor(Descriptor):
    kind = "string"

    def base_validate_sync(self, value: Any, obj: Any = None, key: str | None = None,
                           path: Path = ()) -> list[ErrorMessage]:
        return [] if isinstance(value, str) else self._base_error(path, "string.base", value)

    def length(self, min_value: int, max_value: int | None = None, include: bool = True) -> Self:
        """Require min <= len(value) <= max (< max when include is False)."""
        ensure_ordered(min_value, max_value, origin="StringDescriptor.length")
        return self.custom(bounded("string.length", min_value, max_value, include,
            accepts=lambda value: isinstance(value, str), measure=len))

    def pattern(self, regex: str | re.Pattern) -> Self:
        """Require the regex to match somewhere in the value (re.search)."""
        compiled = re.compile(regex) if isinstance(regex, str) else regex

        def matches(value: Any, obj: Any = None, key: str | None = None, path: Path = ()) -> str | None:
            if isinstance(value, str) and not compiled.search(value):
                return get_message("string.pattern", compiled.pattern)
            return None
        return self.custom(matches)


# ============================================================================
# Number
# ============================================================================

@dataclass(frozen=True, slots=True, eq=False)
class NumberDescriptor(Descriptor):
    kind = "number"

    def base_validate_sync(self, value: Any, obj: Any = None, key: str | None = None,
                           path: Path = ()) -> list[ErrorMessage]:
        return [] if is_number(value) else self._base_error(path, "number.base", value)

    def integer(self) -> Self:
        """Reject numbers with a fractional part (number.int)."""
        def is_integer(value: Any, obj: Any = None, key: str | None = None, path: Path = ()) -> str | None:
            if is_number(value) and not is_whole(value): return get_message("number.int", value)
            return None
        return self.custom(is_integer)

    def floating(self) -> Self:
        """Reject whole numbers (number.float)."""
        def is_floating(value: Any, obj: Any = None, key: str | None = None, path: Path = ()) -> str | None:
            if is_number(value) and is_whole(value): return get_message("number.float", value)
            return None
        return self.custom(is_floating)

    def range(self, min_value: float, max_value: float | None = None, include: bool = True) -> Self:
        """Require min <= value <= max (< max when include is False)."""
        for bound in (min_value, max_value):
            if bound is not None and not is_number(bound):
                raise bound_type_mismatch(bound, "number", origin="NumberDescriptor.range")
        ensure_ordered(min_value, max_value, origin="NumberDescriptor.range")
        return self.custom(bounded("number.range", min_value, max_value, include, accepts=is_number))


# ============================================================================
# Boolean / Function / RegExp
# ============================================================================

@dataclass(frozen=True, slots=True, eq=False)
class BooleanDescriptor(Descriptor):
    kind = "boolean"

    def base_validate_sync(self, value: Any, obj: Any = None, key: str | None = None,
                           path: Path = ()) -> list[ErrorMessage]:
        return [] if isinstance(value, bool) else self._base_error(path, "boolean.base", value)


@dataclass(frozen=True, slots=True, eq=False)
class FunctionDescriptor(Descriptor):
    """Any callable: functions, methods, classes, objects defining __call__."""
    kind = "function"

    def base_validate_sync(self, value: Any, obj: Any = None, key: str | None = None,
                           path: Path = ()) -> list[ErrorMessage]:
        return [] if callable(value) else self._base_error(path, "function.base", value)


@dataclass(frozen=True, slots=True, eq=False)
class RegExpDescriptor(Descriptor):
    """Compiled regular expression (re.Pattern)."""
    kind = "regexp"

    def base_validate_sync(self, value: Any, obj: Any = None, key: str | None = None,
                           path: Path = ()) -> list[ErrorMessage]:
        return [] if isinstance(value, re.Pattern) else self._base_error(path, "regExp.base", value)


# ============================================================================
# Date
# ============================================================================

def _is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


def _align(value: date, bound: date) -> date:
    """Make value comparable with bound.

    date vs datetime mixes are converted to the bound's kind. Naive datetimes
    are read as UTC when the other side is timezone-aware.
    """
    if not isinstance(bound, datetime):
        return value.date() if isinstance(value, datetime) else value
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if _is_aware(bound) and not _is_aware(value):
        return value.replace(tzinfo=timezone.utc)
    if _is_aware(value) and not _is_aware(bound):
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


@dataclass(frozen=True, slots=True, eq=False)
class DateDescriptor(Descriptor):
    """datetime.date or datetime.datetime."""
    kind = "date"

    def base_validate_sync(self, value: Any, obj: Any = None, key: str | None = None,
                           path: Path = ()) -> list[ErrorMessage]:
        return [] if isinstance(value, date) else self._base_error(path, "date.base", value)

    def range(self, min_value: date, max_value: date | None = None, include: bool = True) -> Self:
        """Require min <= value <= max (< max when include is False)."""
        for bound in (min_value, max_value):
            if bound is not None and not isinstance(bound, date):
                raise bound_type_mismatch(bound, "date", origin="DateDescriptor.range")
        if max_value is not None and isinstance(min_value, datetime) != isinstance(max_value, datetime):
            raise bound_type_mismatch(max_value, type(min_value).__name__, origin="DateDescriptor.range")
        if isinstance(max_value, datetime) and _is_aware(min_value) != _is_aware(max_value):
            expected = "timezone-aware datetime" if _is_aware(min_value) else "naive datetime"
            raise bound_type_mismatch(max_value, expected, origin="DateDescriptor.range")
        ensure_ordered(min_value, max_value, origin="DateDescriptor.range")
        return self.custom(bounded("date.range", min_value, max_value, include,
            accepts=lambda value: isinstance(value, date), measure=lambda value: _align(value, min_value)))
