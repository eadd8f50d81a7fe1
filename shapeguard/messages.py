"""Error Message Catalog

Maps an error-kind key ("<kind>.<case>", e.g. "string.length.min") to a
template with positional placeholders {0}, {1}, ... substituted by the
arguments of the rule that failed.

The active catalog is read at check time, so configure_messages() also
affects descriptors built before the call.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from shapeguard.errors import unknown_message_key
from shapeguard.logging import messages_logger

_PLACEHOLDER = re.compile(r"\{([0-9]+)\}")

EN_MESSAGES: Mapping[str, str] = MappingProxyType({
    "object.base": "is not an object",
    "object.type": "is not an instance of {0}",
    "string.base": "is not a string",
    "string.length.min": "length is less than {0}",
    "string.length.max": "length is greater than {1}",
    "string.pattern": "does not match pattern {0}",
    "number.base": "is not a number",
    "number.int": "is not an integer",
    "number.float": "is not a floating point number",
    "number.range.min": "is less than {0}",
    "number.range.max": "is greater than {1}",
    "boolean.base": "is not a boolean",
    "function.base": "is not a function",
    "regExp.base": "is not a regular expression",
    "array.base": "is not an array",
    "array.types": "no matching element type",
    "array.length.min": "array length is less than {0}",
    "array.length.max": "array length is greater than {1}",
    "any.base": "",
    "date.base": "is not a date",
    "date.range.min": "date is earlier than {0}",
    "date.range.max": "date is later than {1}",
    "enum.base": "{0} is not one of the enum values {1}",
})

ZH_MESSAGES: Mapping[str, str] = MappingProxyType({
    "object.base": "不是对象",
    "object.type": "类型不是{0}",
    "string.base": "不是字符串",
    "string.length.min": "长度小于{0}",
    "string.length.max": "长度大于{1}",
    "string.pattern": "不符合模式{0}",
    "number.base": "不是数字",
    "number.int": "不是整数",
    "number.float": "不是浮点数",
    "number.range.min": "小于{0}",
    "number.range.max": "大于{1}",
    "boolean.base": "不是布尔值",
    "function.base": "不是函数",
    "regExp.base": "不是正则表达式",
    "array.base": "不是数组",
    "array.types": "没有匹配类型",
    "array.length.min": "数组长度小于{0}",
    "array.length.max": "数组长度大于{1}",
    "any.base": "",
    "date.base": "不是日期",
    "date.range.min": "日期小于{0}",
    "date.range.max": "日期大于{1}",
    "enum.base": "不在枚举值中{0}",
})

LOCALES: Mapping[str, Mapping[str, str]] = MappingProxyType({"en": EN_MESSAGES, "zh": ZH_MESSAGES})


def render_template(template: str, args: tuple[Any, ...]) -> str:
    """Substitute {n} placeholders; indices without an argument are left as written."""
    def _sub(match: re.Match) -> str:
        index = int(match.group(1))
        return str(args[index]) if index < len(args) else match.group(0)
    return _PLACEHOLDER.sub(_sub, template)


class MessageCatalog:
    """Key -> template lookup with caller overrides merged over defaults."""

    def __init__(self, defaults: Mapping[str, str]):
        self._defaults = dict(defaults)
        self._messages = dict(defaults)

    @classmethod
    def for_locale(cls, locale: str) -> MessageCatalog:
        return cls(LOCALES.get(locale, EN_MESSAGES))

    def keys(self) -> Iterable[str]: return self._messages.keys()

    def template(self, key: str) -> str: return self._messages[key]

    def format(self, key: str, *args: Any) -> str:
        """Render the template for key with positional arguments."""
        return render_template(self._messages[key], args)

    def configure(self, overrides: Mapping[str, str]) -> None:
        """Merge overrides over the current messages.

        Raises:
            UnknownMessageKeyError: if an override names a key outside the catalog.
        """
        if unknown := set(overrides) - set(self._defaults):
            raise unknown_message_key(unknown, origin="MessageCatalog.configure")
        self._messages = {**self._messages, **overrides}
        messages_logger().info("messages_configured", keys=sorted(overrides))

    def reset(self) -> None:
        """Drop every override and return to the defaults."""
        self._messages = dict(self._defaults)


def _initial_catalog() -> MessageCatalog:
    from shapeguard.config import get_settings
    return MessageCatalog.for_locale(get_settings().MESSAGE_LOCALE)


catalog = _initial_catalog()


def configure_messages(overrides: Mapping[str, str]) -> None:
    """Merge overrides over the active catalog for the rest of the process."""
    catalog.configure(overrides)


def reset_messages() -> None:
    catalog.reset()


def get_message(key: str, *args: Any) -> str:
    return catalog.format(key, *args)
