"""Errors raised while decoding a Searchfox response.

Every failure is terminal: the first one aborts the decode and no partial
``Response`` is returned.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import ValidationError


class DecodeError(Exception):
    """The response could not be understood."""


class MalformedPayload(DecodeError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"malformed payload: {reason}")
        self.reason = reason


class SchemaViolation(DecodeError):
    """A fixed field is missing or has the wrong type."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"{location}: {reason}" if location else reason)
        self.location = location
        self.reason = reason


def schema_violation(exc: ValidationError, prefix: str = "") -> SchemaViolation:
    """Translate the first pydantic error into a ``SchemaViolation``."""
    first = exc.errors()[0]
    parts = [prefix] if prefix else []
    parts.extend(str(part) for part in first["loc"])
    return SchemaViolation(".".join(parts), first["msg"])


class UnrecognizedField(DecodeError):
    """A section key matched none of the category patterns."""

    def __init__(self, key: str, expected: Sequence[str]) -> None:
        accepted = ", ".join(f"`{name}`" for name in expected)
        super().__init__(f"unknown field `{key}`, expected one of {accepted}")
        self.key = key
        self.expected = tuple(expected)


class InvalidValue(DecodeError):
    def __init__(self, value: str, expected: str) -> None:
        super().__init__(f"invalid value: `{value}`, expected {expected}")
        self.value = value
        self.expected = expected
