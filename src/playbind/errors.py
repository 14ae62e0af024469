"""Playbind exception hierarchy.

Shared across the options and routing modules so every caller raises and
catches the same types. None of these are caught inside the package: they
signal a contract violation between a call site (or the wire format) and the
expected shape.
"""

from dataclasses import dataclass
from typing import Any


class PlaybindError(Exception):
    """Base for all playbind-specific errors."""


class OptionsError(PlaybindError, TypeError):
    """Raised when a call-time option value cannot be normalized.

    Only records (dataclass instances), mappings, single-element sequences
    of those, and ``None`` are accepted.
    """


@dataclass(frozen=True, slots=True)
class SchemaMismatchError(PlaybindError):
    """A wire value has no defined coercion into the destination field.

    Raised by rehydration before any field is assigned.
    """

    field: str
    key: str
    value: Any
    expected: str

    def __str__(self) -> str:
        return (
            f"cannot assign {type(self.value).__name__} {self.value!r} "
            f"from key {self.key!r} to field {self.field!r} (expected {self.expected})"
        )


class UnknownMatcherError(PlaybindError, TypeError):
    """A URL matcher was given (or holds) something it cannot dispatch on.

    Valid matcher values are a glob string, a compiled ``re.Pattern``,
    or a callable taking the URL and returning a truthy value.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"unsupported URL matcher {value!r} ({type(value).__name__}); "
            "expected a glob string, a compiled regular expression, or a callable"
        )
