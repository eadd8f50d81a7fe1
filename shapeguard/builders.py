"""Descriptor Factories

Types is the construction surface: every call returns a fresh descriptor.

    schema = Types.object({
        "id": Types.number().integer(),
        "kind": Types.enum(["user", "bot"]),
        "created": Types.date(),
    })
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from .descriptors import (
    AnyDescriptor,
    ArrayDescriptor,
    BooleanDescriptor,
    DateDescriptor,
    Descriptor,
    EnumDescriptor,
    FunctionDescriptor,
    NumberDescriptor,
    ObjectDescriptor,
    RegExpDescriptor,
    StringDescriptor,
)


class Types:
    """Static factory for every descriptor kind."""

    @staticmethod
    def object(fields: Mapping[str, Descriptor] | None = None) -> ObjectDescriptor:
        """Record descriptor; fields maps each declared key to its descriptor."""
        return ObjectDescriptor(fields or {})

    @staticmethod
    def string() -> StringDescriptor: return StringDescriptor()

    @staticmethod
    def number() -> NumberDescriptor: return NumberDescriptor()

    @staticmethod
    def boolean() -> BooleanDescriptor: return BooleanDescriptor()

    @staticmethod
    def function() -> FunctionDescriptor: return FunctionDescriptor()

    @staticmethod
    def regexp() -> RegExpDescriptor: return RegExpDescriptor()

    @staticmethod
    def array(types: Iterable[Descriptor] | None = None) -> ArrayDescriptor:
        """Array descriptor; an element passes if it satisfies at least one of types."""
        return ArrayDescriptor(tuple(types or ()))

    @staticmethod
    def any() -> AnyDescriptor: return AnyDescriptor()

    @staticmethod
    def enum(items: Iterable[Any]) -> EnumDescriptor:
        """Descriptor accepting exactly the given values."""
        return EnumDescriptor(tuple(items))

    @staticmethod
    def date() -> DateDescriptor: return DateDescriptor()
