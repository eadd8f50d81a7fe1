"""Descriptor Base

A descriptor is an immutable node describing the expected shape of a value.
Descriptors compose into trees (object fields, array element alternatives)
and every refinement returns a new descriptor:

    name = Types.string().length(1, 32)
    optional_name = name.nullable()     # `name` is untouched

Check protocol (same arguments everywhere: value, obj, key, path):
- check_sync:    base check, then custom rules; returns list[ErrorMessage]
- check:         base check and custom rules concurrently; returns list[ErrorMessage]
- validate_sync: check_sync, raising ValidationFailure if anything was found
- validate:      check, raising ValidationFailure if anything was found

Custom rules are plain callables `(value, obj, key, path) -> str | None`
or coroutine functions with the same signature. A coroutine rule reached
from the sync variants raises SyncUsageOnAsyncRuleError.
"""
from __future__ import annotations

import asyncio
import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, ClassVar, Self, Sequence, TypeAlias

from shapeguard.errors import SyncUsageOnAsyncRuleError, sync_on_async_rule
from shapeguard.logging import descriptor_logger
from shapeguard.messages import get_message

from .errors import ErrorMessage, ValidationFailure

Path: TypeAlias = tuple[str, ...]
Validator: TypeAlias = Callable[..., "str | None | Awaitable[str | None]"]


@dataclass(frozen=True, slots=True, eq=False, kw_only=True)
class Descriptor(ABC):
    """Base class for all descriptors.

    Attributes:
        is_nullable: None short-circuits every check (base and custom) when set.
        validators: Custom rules in registration (= execution) order.
    """
    kind: ClassVar[str] = "any"

    is_nullable: bool = False
    validators: tuple[Validator, ...] = ()

    # ------------------------------------------------------------------
    # Base checks
    # ------------------------------------------------------------------

    @abstractmethod
    def base_validate_sync(self, value: Any, obj: Any = None, key: str | None = None,
                           path: Path = ()) -> list[ErrorMessage]:
        """Structural check intrinsic to the descriptor kind."""

    async def base_validate(self, value: Any, obj: Any = None, key: str | None = None,
                            path: Path = ()) -> list[ErrorMessage]:
        """Async structural check. Kinds with children override this to fan out."""
        return self.base_validate_sync(value, obj, key, path)

    def _base_error(self, path: Path, message_key: str, *args: Any) -> list[ErrorMessage]:
        return [ErrorMessage(path, get_message(message_key, *args))]

    # ------------------------------------------------------------------
    # Check protocol
    # ------------------------------------------------------------------

    def check_sync(self, value: Any, obj: Any = None, key: str | None = None,
                   path: Sequence[str] = ()) -> list[ErrorMessage]:
        """Check value and return every error found: base check first, then custom rules."""
        path = tuple(path)
        if self.is_nullable and value is None: return []
        base_errors = self.base_validate_sync(value, obj, key, path)
        custom_errors = self._custom_validate_sync(value, obj, key, path)
        return [*base_errors, *custom_errors]

    async def check(self, value: Any, obj: Any = None, key: str | None = None,
                    path: Sequence[str] = ()) -> list[ErrorMessage]:
        """Check value asynchronously.

        The base check and the custom rules run concurrently, so a custom rule
        cannot rely on the base check having passed. Results are concatenated
        as base errors followed by custom errors.
        """
        path = tuple(path)
        if self.is_nullable and value is None: return []
        base_errors, custom_errors = await asyncio.gather(
            self.base_validate(value, obj, key, path),
            self._custom_validate(value, obj, key, path),
        )
        return [*base_errors, *custom_errors]

    def validate_sync(self, value: Any) -> None:
        """Raise ValidationFailure carrying every error check_sync found."""
        if errors := self.check_sync(value):
            raise ValidationFailure.from_errors(errors, origin=type(self).__name__)

    async def validate(self, value: Any) -> None:
        """Raise ValidationFailure carrying every error check found."""
        if errors := await self.check(value):
            raise ValidationFailure.from_errors(errors, origin=type(self).__name__)

    def get_sync_validator(self) -> Callable[[Any], None]: return self.validate_sync

    def get_async_validator(self) -> Callable[[Any], Awaitable[None]]: return self.validate

    def get_sync_checker(self) -> Callable[..., list[ErrorMessage]]: return self.check_sync

    def get_async_checker(self) -> Callable[..., Awaitable[list[ErrorMessage]]]: return self.check

    # ------------------------------------------------------------------
    # Custom rules
    # ------------------------------------------------------------------

    def _custom_validate_sync(self, value: Any, obj: Any, key: str | None, path: Path) -> list[ErrorMessage]:
        errors: list[ErrorMessage] = []
        for validator in self.validators:
            rule_path = (*path, key) if key else path
            if inspect.iscoroutinefunction(validator):
                raise self._sync_misuse(validator, rule_path)
            message = validator(value, obj, key, rule_path)
            if inspect.isawaitable(message):
                if inspect.iscoroutine(message): message.close()
                raise self._sync_misuse(validator, rule_path)
            if message: errors.append(ErrorMessage(path, str(message)))
        return errors

    async def _custom_validate(self, value: Any, obj: Any, key: str | None, path: Path) -> list[ErrorMessage]:
        rule_path = (*path, key) if key else path

        async def run(validator: Validator) -> ErrorMessage | None:
            message = validator(value, obj, key, rule_path)
            if inspect.isawaitable(message): message = await message
            # Recorded at the incoming path, not rule_path
            return ErrorMessage(path, str(message)) if message else None

        results = await asyncio.gather(*(run(v) for v in self.validators))
        return [error for error in results if error is not None]

    def _sync_misuse(self, validator: Validator, rule_path: Path) -> SyncUsageOnAsyncRuleError:
        error = sync_on_async_rule(validator, rule_path, origin=type(self).__name__)
        descriptor_logger().warning("sync_check_on_async_rule", descriptor=self.kind,
            validator=error.metadata["validator"], path=list(rule_path))
        return error

    # ------------------------------------------------------------------
    # Copy-on-configure
    # ------------------------------------------------------------------

    def _clone(self) -> Self:
        """Fresh instance of the same kind built from its constructor fields.

        Kinds with constructor fields override this and copy any collection
        one level deep.
        """
        return type(self)()

    def copy(self) -> Self:
        """Clone keeping the nullable flag and every custom rule."""
        return replace(self._clone(), is_nullable=self.is_nullable, validators=tuple(self.validators))

    def custom(self, validator: Validator) -> Self:
        """Clone with validator appended to the custom rules."""
        clone = self.copy()
        return replace(clone, validators=(*clone.validators, validator))

    def nullable(self) -> Self:
        """Clone that accepts None without running any check."""
        return replace(self.copy(), is_nullable=True)
