"""Errors raised while parsing control commands."""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(Enum):
    """The ways in which a command string can fail to parse.

    Each value is the message template for that kind of failure.
    """

    EMPTY_STRING = "given input was empty"
    NO_SUBCOMMAND = "no subcommand was specified"
    UNKNOWN_CATEGORY = "unknown command category '{0}'"
    UNKNOWN_SUBCOMMAND = "unknown subcommand '{0}'"
    INVALID_ARGUMENT = "invalid value specified for argument '{0}'"
    DUPLICATE_ARGUMENT = "duplicate argument specified '{0}'"
    UNEXPECTED_ARGUMENT = "unexpected argument '{0}' was specified"
    MISSING_ARGUMENT = "missing argument '{0}'"


class ParseCommandError(ValueError):
    """Raised when a command string cannot be turned into a command."""

    def __init__(self, kind: ParseErrorKind, value: str | None = None) -> None:
        super().__init__(kind, value)
        self.kind = kind
        self.value = value

    def __str__(self) -> str:
        return self.kind.value.format(self.value)

    def __repr__(self) -> str:
        if self.value is None:
            return f"{type(self).__name__}(ParseErrorKind.{self.kind.name})"
        return f"{type(self).__name__}(ParseErrorKind.{self.kind.name}, {self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseCommandError):
            return NotImplemented
        return (self.kind, self.value) == (other.kind, other.value)

    def __hash__(self) -> int:
        return hash((self.kind, self.value))