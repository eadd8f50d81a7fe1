"""Enum Descriptor: membership in a fixed sequence of allowed values."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self

from .base import Descriptor, Path
from .errors import ErrorMessage


def same_value(value: Any, item: Any) -> bool:
    """Strict equality: identical, or equal with exactly the same type (1 != 1.0 != True)."""
    return value is item or (type(value) is type(item) and value == item)


@dataclass(frozen=True, slots=True, eq=False)
class EnumDescriptor(Descriptor):
    kind = "enum"

    items: tuple[Any, ...]

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def _clone(self) -> Self:
        return EnumDescriptor(list(self.items))

    def base_validate_sync(self, value: Any, obj: Any = None, key: str | None = None,
                           path: Path = ()) -> list[ErrorMessage]:
        for item in self.items:
            if same_value(value, item): return []
        return self._base_error(path, "enum.base", value, list(self.items))
