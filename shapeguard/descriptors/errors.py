"""Validation Error Records

ErrorMessage is the unit a check produces: the path of the node that
reported it plus the rendered message. ValidationFailure is what
validate()/validate_sync() raise when a check produced any of them.

Error Format (ValidationFailure.to_dict):
{
    "error": {
        "type": "validation_error",
        "code": "E2000_VALIDATION_FAILED",
        "message": "Validation failed",
        "error_count": 1,
        "errors": [
            {"path": ["user", "email"], "field": "user.email", "message": "is not a string"}
        ]
    }
}
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from shapeguard.errors import ErrorCode, ShapeguardError


@dataclass(frozen=True, slots=True)
class ErrorMessage:
    """A single validation error located by its path."""
    path: tuple[str, ...]
    message: str

    def __post_init__(self):
        if not isinstance(self.path, tuple):
            object.__setattr__(self, "path", tuple(self.path))

    @property
    def field_path(self) -> str:
        """Dotted path, "$" for the root."""
        return format_path(self.path)

    def to_dict(self) -> dict[str, Any]:
        return {"path": list(self.path), "field": self.field_path, "message": self.message}


def format_path(path: Sequence[str]) -> str:
    """Format a path as a dotted string; numeric segments render as [i].

    Array indices and all-digit object keys ("2024") both render as [i];
    ErrorMessage.path keeps the raw segments when the difference matters.
    """
    if not path: return "$"
    parts: list[str] = []
    for segment in map(str, path):
        if segment.isdigit(): parts.append(f"[{segment}]")
        elif parts: parts.append(f".{segment}")
        else: parts.append(segment)
    return "".join(parts)


@dataclass
class ValidationFailure(ShapeguardError):
    """Raised by validate()/validate_sync() with every error the check found."""
    errors: list[ErrorMessage] = field(default_factory=list)
    code: ErrorCode = ErrorCode.E2000_VALIDATION_FAILED

    def __str__(self) -> str:
        if not self.errors: return self.message
        if len(self.errors) == 1: return f"{(e := self.errors[0]).field_path}: {e.message}"
        return f"{self.message} ({len(self.errors)} errors)"

    def __iter__(self):
        return iter(self.errors)

    def __len__(self) -> int: return len(self.errors)

    @property
    def field_errors(self) -> dict[str, list[ErrorMessage]]:
        """Group errors by dotted path."""
        result: dict[str, list[ErrorMessage]] = {}
        for error in self.errors: result.setdefault(error.field_path, []).append(error)
        return result

    @property
    def first_error(self) -> ErrorMessage | None: return self.errors[0] if self.errors else None

    def get_errors_for_path(self, *path: str) -> list[ErrorMessage]:
        return [e for e in self.errors if e.path == path]

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logs and reports."""
        return {"error": {"type": "validation_error", "code": self.code.name, "message": self.message,
            "error_count": len(self.errors), "errors": [e.to_dict() for e in self.errors]}}

    @classmethod
    def from_errors(cls, errors: Sequence[ErrorMessage], *, origin: str = "") -> ValidationFailure:
        failure = cls(message="Validation failed", errors=list(errors))
        if origin: failure.context = failure.context.with_origin(origin)
        return failure
