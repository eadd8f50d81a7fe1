"""Tests for the shared descriptor check protocol."""

from __future__ import annotations

import asyncio
import inspect

import pytest

from shapeguard import (
    AnyDescriptor,
    ErrorMessage,
    SyncUsageOnAsyncRuleError,
    Types,
    UsageError,
    ValidationFailure,
)


@pytest.fixture
def sync_type():
    return Types.object({"key1": Types.string()})


@pytest.fixture
def async_type(wait_rule):
    return Types.object({"key1": Types.any().custom(wait_rule(0.01))})


ITEM = {"key1": ""}


class TestCopy:
    """copy() and copy-on-configure."""

    def test_copy_returns_new_equal_instance(self) -> None:
        type1 = Types.any()
        type2 = type1.copy()
        assert type1 is not type2
        assert type1.is_nullable == type2.is_nullable
        assert type1.validators == type2.validators

    def test_copy_keeps_nullable_and_rules(self) -> None:
        rule = lambda value, *args: None
        original = Types.string().custom(rule).nullable()
        clone = original.copy()
        assert clone.is_nullable is True
        assert clone.validators == (rule,)

    def test_custom_does_not_mutate_receiver(self) -> None:
        base = Types.any()
        refined = base.custom(lambda value, *args: "error" if value == 10 else None)
        assert base is not refined
        assert base.validators == ()
        assert base.check_sync(10) == []
        assert len(refined.check_sync(10)) == 1

    def test_custom_on_clone_keeps_prior_rules(self) -> None:
        first = Types.any().custom(lambda value, *args: "first")
        second = first.copy().custom(lambda value, *args: "second")
        assert [e.message for e in second.check_sync(1)] == ["first", "second"]
        assert [e.message for e in first.check_sync(1)] == ["first"]

    def test_nullable_does_not_mutate_receiver(self) -> None:
        base = Types.string()
        assert base.nullable().check_sync(None) == []
        assert len(base.check_sync(None)) == 1

    def test_descriptor_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Types.string().is_nullable = True  # type: ignore[misc]


class TestSyncProtocol:
    """check_sync / validate_sync and their binders."""

    def test_check_sync_passes(self, sync_type) -> None:
        assert sync_type.check_sync({"key1": ""}) == []

    def test_check_sync_reports_base_then_custom(self) -> None:
        descriptor = Types.string().custom(lambda value, *args: "custom")
        errors = descriptor.check_sync(1)
        assert [e.message for e in errors] == ["is not a string", "custom"]

    def test_check_sync_on_async_rule_raises(self, async_type) -> None:
        with pytest.raises(SyncUsageOnAsyncRuleError):
            async_type.check_sync(ITEM)

    def test_sync_rule_returning_awaitable_raises(self) -> None:
        async def later():
            return "never seen"

        descriptor = Types.any().custom(lambda value, *args: later())
        with pytest.raises(SyncUsageOnAsyncRuleError):
            descriptor.check_sync(1)

    def test_sync_misuse_is_a_usage_error_not_a_validation_failure(self, async_type) -> None:
        with pytest.raises(UsageError) as exc_info:
            async_type.check_sync(ITEM)
        assert not isinstance(exc_info.value, ValidationFailure)

    def test_validate_sync_passes(self, sync_type) -> None:
        sync_type.validate_sync(ITEM)

    def test_validate_sync_raises_with_all_errors(self) -> None:
        descriptor = Types.object({"a": Types.string(), "b": Types.number()})
        with pytest.raises(ValidationFailure) as exc_info:
            descriptor.validate_sync({"a": 1, "b": "x"})
        assert exc_info.value.errors == [
            ErrorMessage(("a",), "is not a string"),
            ErrorMessage(("b",), "is not a number"),
        ]

    def test_validate_sync_on_async_rule_raises(self, async_type) -> None:
        with pytest.raises(SyncUsageOnAsyncRuleError):
            async_type.validate_sync(ITEM)

    def test_sync_validator_binder(self, sync_type, async_type) -> None:
        sync_type.get_sync_validator()(ITEM)
        with pytest.raises(SyncUsageOnAsyncRuleError):
            async_type.get_sync_validator()(ITEM)

    def test_sync_checker_binder(self, sync_type, async_type) -> None:
        assert sync_type.get_sync_checker()(ITEM) == []
        with pytest.raises(SyncUsageOnAsyncRuleError):
            async_type.get_sync_checker()(ITEM)

    def test_custom_rule_receives_value_and_context(self) -> None:
        calls = []

        def rule(value, obj=None, key=None, path=()):
            calls.append((value, obj, key, path))

        Types.any().custom(rule).check_sync(5)
        assert calls == [(5, None, None, ())]

    def test_falsy_rule_results_are_not_errors(self) -> None:
        descriptor = Types.any().custom(lambda *args: None).custom(lambda *args: "")
        assert descriptor.check_sync(1) == []


class TestAsyncProtocol:
    """check / validate and their binders."""

    def test_check_returns_coroutine(self, async_type) -> None:
        result = async_type.check(ITEM)
        assert inspect.iscoroutine(result)
        result.close()

    @pytest.mark.asyncio
    async def test_check_with_async_rule(self, async_type) -> None:
        assert await async_type.check(ITEM) == []

    @pytest.mark.asyncio
    async def test_check_with_sync_rule(self) -> None:
        descriptor = Types.any().custom(lambda value, *args: "error" if value == 10 else None)
        assert await descriptor.check(1) == []
        assert await descriptor.check(10) == [ErrorMessage((), "error")]

    @pytest.mark.asyncio
    async def test_validate_passes(self, async_type) -> None:
        await async_type.validate(ITEM)

    @pytest.mark.asyncio
    async def test_validate_raises(self, wait_rule) -> None:
        descriptor = Types.any().custom(wait_rule(0.01, "bad"))
        with pytest.raises(ValidationFailure) as exc_info:
            await descriptor.validate(1)
        assert exc_info.value.errors == [ErrorMessage((), "bad")]

    @pytest.mark.asyncio
    async def test_async_binders(self, sync_type, async_type) -> None:
        await async_type.get_async_validator()(ITEM)
        await sync_type.get_async_validator()(ITEM)
        assert await sync_type.get_async_checker()(ITEM) == []
        assert await async_type.get_async_checker()(ITEM) == []

    @pytest.mark.asyncio
    async def test_custom_results_keep_registration_order(self, wait_rule) -> None:
        descriptor = (Types.any()
            .custom(wait_rule(0.03, "slow"))
            .custom(wait_rule(0.0, "fast")))
        assert [e.message for e in await descriptor.check(1)] == ["slow", "fast"]

    @pytest.mark.asyncio
    async def test_base_and_custom_run_concurrently(self) -> None:
        seen_base_done = []

        class SlowBase(AnyDescriptor):
            async def base_validate(self, value, obj=None, key=None, path=()):
                await asyncio.sleep(0.02)
                seen_base_done.append(True)
                return []

        async def rule(value, obj=None, key=None, path=()):
            return "base pending" if not seen_base_done else None

        descriptor = SlowBase().custom(rule)
        assert [e.message for e in await descriptor.check(1)] == ["base pending"]

    @pytest.mark.asyncio
    async def test_check_and_check_sync_agree(self) -> None:
        descriptor = Types.object({
            "name": Types.string().length(2),
            "age": Types.number().integer().range(0, 150),
            "tags": Types.array([Types.string()]),
        })
        value = {"name": "x", "age": 200.5, "tags": ["a", 1]}
        sync_errors = descriptor.check_sync(value)
        async_errors = await descriptor.check(value)
        assert set(sync_errors) == set(async_errors)
        assert len(sync_errors) == 4


class TestNullable:
    """nullable() short-circuits every check on None."""

    @pytest.mark.parametrize("descriptor", [
        Types.object(), Types.string(), Types.number(), Types.boolean(), Types.function(),
        Types.regexp(), Types.array(), Types.date(), Types.enum([1]),
    ])
    def test_nullable_accepts_none_non_nullable_rejects(self, descriptor) -> None:
        assert descriptor.nullable().check_sync(None) == []
        assert len(descriptor.check_sync(None)) == 1

    def test_nullable_skips_custom_rules(self) -> None:
        descriptor = Types.any().custom(lambda value, *args: "always").nullable()
        assert descriptor.check_sync(None) == []
        assert len(descriptor.check_sync(0)) == 1

    def test_nullable_any(self) -> None:
        descriptor = Types.any().nullable()
        descriptor.validate_sync(None)

    @pytest.mark.asyncio
    async def test_nullable_async_skips_async_rule(self, wait_rule) -> None:
        descriptor = Types.string().custom(wait_rule(0.01, "bad")).nullable()
        assert await descriptor.check(None) == []
