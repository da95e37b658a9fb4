"""Parsing of ``key=value`` command arguments."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from .errors import ParseCommandError, ParseErrorKind

T = TypeVar("T")


class Arguments:
    """A set of named argument values taken from a command string."""

    def __init__(self, values: dict[str, str]) -> None:
        self._values = dict(values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"

    @classmethod
    def parse(cls, string: str, options: Iterable[str]) -> Arguments:
        """Split ``string`` into ``key=value`` pairs, allowing only ``options`` as keys."""
        values: dict[str, str] = {}
        for arg in (part for part in string.strip().split(" ") if part):
            key, sep, value = arg.partition("=")
            if not sep:
                raise ParseCommandError(ParseErrorKind.INVALID_ARGUMENT, arg)
            if key in values:
                raise ParseCommandError(ParseErrorKind.DUPLICATE_ARGUMENT, key)
            values[key] = value

        allowed = set(options)
        for key in values:
            if key not in allowed:
                raise ParseCommandError(ParseErrorKind.UNEXPECTED_ARGUMENT, key)

        return cls(values)

    def get(self, name: str, convert: Callable[[str], T] = str) -> T:
        """Return the converted value of ``name``.

        Any failure, a missing argument or a value that does not convert,
        is reported as a missing argument.
        """
        try:
            value = self.get_optional(name, convert)
        except ParseCommandError:
            value = None
        if value is None:
            raise ParseCommandError(ParseErrorKind.MISSING_ARGUMENT, name)
        return value

    def get_optional(self, name: str, convert: Callable[[str], T] = str) -> T | None:
        """Return the converted value of ``name``, or ``None`` if it was not given."""
        raw = self._values.get(name)
        if raw is None:
            return None
        try:
            return convert(raw)
        except (ValueError, TypeError) as error:
            raise ParseCommandError(ParseErrorKind.INVALID_ARGUMENT, name) from error

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Arguments):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]