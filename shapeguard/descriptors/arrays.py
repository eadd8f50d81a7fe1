"""Array Descriptor

Each element must satisfy at least one of the element alternatives (any-of).
With no alternatives every element is accepted.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Self

from .base import Descriptor, Path
from .errors import ErrorMessage
from .rules import bounded, ensure_ordered


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


@dataclass(frozen=True, slots=True, eq=False)
class ArrayDescriptor(Descriptor):
    """List/tuple whose elements each match one of `types`."""
    kind = "array"

    types: tuple[Descriptor, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "types", tuple(self.types or ()))

    def _clone(self) -> Self:
        return ArrayDescriptor(list(self.types))

    def base_validate_sync(self, value: Any, obj: Any = None, key: str | None = None,
                           path: Path = ()) -> list[ErrorMessage]:
        if not is_array(value): return self._base_error(path, "array.base", value)
        if not self.types: return []
        errors: list[ErrorMessage] = []
        for index, item in enumerate(value):
            item_path = (*path, str(index))
            if not any(not alternative.check_sync(item, obj, key, item_path) for alternative in self.types):
                errors.extend(self._base_error(path, "array.types", item, index))
        return errors

    async def base_validate(self, value: Any, obj: Any = None, key: str | None = None,
                            path: Path = ()) -> list[ErrorMessage]:
        if not is_array(value): return self._base_error(path, "array.base", value)
        if not self.types: return []
        results = await asyncio.gather(*(
            self._match_element(item, index, obj, key, path) for index, item in enumerate(value)
        ))
        return [error for errors in results for error in errors]

    async def _match_element(self, item: Any, index: int, obj: Any, key: str | None,
                             path: Path) -> list[ErrorMessage]:
        item_path = (*path, str(index))
        results = await asyncio.gather(*(alternative.check(item, obj, key, item_path) for alternative in self.types))
        if any(not errors for errors in results): return []
        return self._base_error(path, "array.types", item, index)

    def length(self, min_value: int, max_value: int | None = None, include: bool = True) -> Self:
        """Require min <= len(value) <= max (< max when include is False)."""
        ensure_ordered(min_value, max_value, origin="ArrayDescriptor.length")
        return self.custom(bounded("array.length", min_value, max_value, include, accepts=is_array, measure=len))
