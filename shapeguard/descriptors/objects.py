"""Object Descriptor

Checks associative records field by field. Keys present only in the value
are ignored; keys declared but absent from the value are checked as None.
"""
from __future__ import annotations

import asyncio
import dataclasses
import types
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterator, Self

from shapeguard.messages import get_message

from .base import Descriptor, Path
from .errors import ErrorMessage

_NOT_RECORDS = (str, bytes, bytearray, int, float, complex, list, tuple, set, frozenset, type,
    types.FunctionType, types.BuiltinFunctionType, types.MethodType, types.ModuleType)


def is_record(value: Any) -> bool:
    """Mappings and plain attribute-bearing instances (dataclasses, simple classes)."""
    if isinstance(value, Mapping): return True
    if value is None or isinstance(value, _NOT_RECORDS): return False
    return dataclasses.is_dataclass(value) or hasattr(value, "__dict__")


def record_keys(value: Any) -> list[str]:
    if isinstance(value, Mapping): return list(value.keys())
    if dataclasses.is_dataclass(value): return [f.name for f in dataclasses.fields(value)]
    return list(vars(value))


def record_get(value: Any, key: str) -> Any:
    if isinstance(value, Mapping): return value.get(key)
    return getattr(value, key, None)


@dataclass(frozen=True, slots=True, eq=False)
class ObjectDescriptor(Descriptor):
    """Record whose declared fields each satisfy their own descriptor."""
    kind = "object"

    fields: Mapping[str, Descriptor] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "fields", types.MappingProxyType(dict(self.fields or {})))

    def _clone(self) -> Self:
        return ObjectDescriptor(dict(self.fields))

    def _declared_items(self, value: Any) -> Iterator[tuple[str, Any]]:
        """(key, item) for declared keys: value order first, then declaration order."""
        value_keys = record_keys(value)
        seen = set(value_keys)
        for key in value_keys:
            if key in self.fields: yield key, record_get(value, key)
        for key in self.fields:
            if key not in seen: yield key, None

    def base_validate_sync(self, value: Any, obj: Any = None, key: str | None = None,
                           path: Path = ()) -> list[ErrorMessage]:
        if not is_record(value): return self._base_error(path, "object.base", value)
        errors: list[ErrorMessage] = []
        for field_key, item in self._declared_items(value):
            errors.extend(self.fields[field_key].check_sync(item, value, field_key, (*path, field_key)))
        return errors

    async def base_validate(self, value: Any, obj: Any = None, key: str | None = None,
                            path: Path = ()) -> list[ErrorMessage]:
        if not is_record(value): return self._base_error(path, "object.base", value)
        results = await asyncio.gather(*(
            self.fields[field_key].check(item, value, field_key, (*path, field_key))
            for field_key, item in self._declared_items(value)
        ))
        return [error for errors in results for error in errors]

    def type(self, klass: type) -> Self:
        """Require the value to be an instance of klass (object.type)."""
        def is_instance(value: Any, obj: Any = None, key: str | None = None, path: Path = ()) -> str | None:
            if not isinstance(value, klass): return get_message("object.type", klass.__qualname__)
            return None
        return self.custom(is_instance)
