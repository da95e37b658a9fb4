"""Control commands understood by the daemon and how to parse them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .arguments import Arguments
from .errors import ParseCommandError, ParseErrorKind

_USIZE_MAX = 2**64 - 1
_USIZE_PATTERN = re.compile(r"\+?[0-9]+")


class UnknownSortDirectionError(ValueError):
    """Raised for text that names no sort direction."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return f"unknown sort direction '{self.text}'"


class SortDirection(Enum):
    """Order in which a listing is sorted."""

    ASCENDING = "ascending"
    DESCENDING = "descending"

    @classmethod
    def parse(cls, text: str) -> SortDirection:
        """Parse a direction name, ignoring case."""
        lowered = text.lower()
        if lowered in ("a", "asc", "ascending"):
            return cls.ASCENDING
        if lowered in ("d", "desc", "descending"):
            return cls.DESCENDING
        raise UnknownSortDirectionError(lowered)


@dataclass(frozen=True)
class AlbumList:
    """List all albums."""

    sort: SortDirection = SortDirection.DESCENDING


@dataclass(frozen=True)
class AlbumListTracks:
    """List the tracks of one album."""

    id: int


AlbumCommand = Union[AlbumList, AlbumListTracks]


@dataclass(frozen=True)
class Album:
    """A command in the ``album`` category."""

    command: AlbumCommand


Command = Album


def _parse_usize(text: str) -> int:
    if not _USIZE_PATTERN.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError(f"unsigned integer out of range: {text!r}")
    return value


def parse_album_command(string: str) -> AlbumCommand:
    """Parse the part of a command after the ``album`` category."""
    subcommand, _, rest = string.partition(" ")
    if subcommand == "":
        raise ParseCommandError(ParseErrorKind.NO_SUBCOMMAND)
    if subcommand == "list":
        args = Arguments.parse(rest, ["sort"])
        sort = args.get_optional("sort", SortDirection.parse)
        return AlbumList(sort=SortDirection.DESCENDING if sort is None else sort)
    if subcommand == "list-tracks":
        args = Arguments.parse(rest, ["id"])
        return AlbumListTracks(id=args.get("id", _parse_usize))
    raise ParseCommandError(ParseErrorKind.UNKNOWN_SUBCOMMAND, subcommand)


def parse_command(string: str) -> Command:
    """Parse a whole command line such as ``album list sort=asc``."""
    category, _, rest = string.strip().partition(" ")
    if category == "":
        raise ParseCommandError(ParseErrorKind.EMPTY_STRING)
    if category == "album":
        return Album(parse_album_command(rest))
    raise ParseCommandError(ParseErrorKind.UNKNOWN_CATEGORY, category)